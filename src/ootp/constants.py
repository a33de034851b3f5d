import enum
import hashlib
from typing import Any, Callable

from .exceptions import UnsupportedAlgorithmError


class Algorithm(str, enum.Enum):
    """
    Hash functions the HMAC can be computed with.

    The value of each member is its ``hashlib`` name.
    """

    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"

    @property
    def digest(self) -> Callable[..., Any]:
        return getattr(hashlib, self.value)

    @classmethod
    def coerce(cls, value: Any) -> "Algorithm":
        """
        :param value: an ``Algorithm``, a name like ``"SHA256"`` or ``"sha-256"``,
            or a hashlib constructor such as ``hashlib.sha256``
        :returns: the matching ``Algorithm``
        """
        if isinstance(value, cls):
            return value
        if callable(value):
            name = getattr(value, "__name__", "")
            if name.startswith("openssl_"):
                name = name[len("openssl_") :]
        elif isinstance(value, str):
            name = value
        else:
            raise UnsupportedAlgorithmError("unsupported algorithm: {!r}".format(value))

        key = name.lower().replace("-", "")
        if key.startswith("sha3") and not key.startswith("sha3_"):
            key = "sha3_" + key[4:]
        try:
            return cls(key)
        except ValueError:
            raise UnsupportedAlgorithmError("unsupported algorithm: {!r}".format(value)) from None


DEFAULT_DIGITS = 6
DEFAULT_COUNTER = 0
DEFAULT_BREADTH = 0
DEFAULT_PERIOD = 30
DEFAULT_ALGORITHM = Algorithm.SHA1

# The truncated value is 31 bits wide, so it never has more than 10 decimal digits.
MIN_DIGITS = 1
MAX_DIGITS = 10

MAX_COUNTER = 2**64 - 1
