import hmac
import logging
from typing import Any, Union

from .constants import Algorithm
from .exceptions import InvalidSecretError
from .utils import validate_counter, validate_digits

log = logging.getLogger(__name__)

SecretLike = Union[bytes, bytearray, memoryview, str]


class OTP(object):
    """
    Base class for OTP handlers.

    Owns the shared secret and implements the RFC 4226 code computation that
    both HOTP and TOTP reduce to.
    """

    def __init__(self, secret: SecretLike) -> None:
        """
        :param secret: the shared secret as raw bytes. A ``str`` is UTF-8 encoded,
            it is NOT base32 decoded.
        """
        if isinstance(secret, str):
            secret = secret.encode("utf-8")
        elif not isinstance(secret, (bytes, bytearray, memoryview)):
            raise InvalidSecretError("secret must be bytes or str, not {}".format(type(secret).__name__))
        self._secret = bytes(secret)
        if not self._secret:
            log.warning("OTP created with an empty secret")

    @property
    def secret(self) -> bytes:
        return self._secret

    def generate_otp(self, counter: int, digits: int, algorithm: Any) -> str:
        """
        :param counter: the HMAC counter value to use as the OTP input.
            Usually either the counter, or the computed integer based on the Unix timestamp
        :param digits: length of the returned code
        :param algorithm: an ``Algorithm`` or anything ``Algorithm.coerce`` accepts
        :returns: the code, left padded with zeros to exactly ``digits`` characters
        """
        # Implements RFC 4226
        digits = validate_digits(digits)
        algorithm = Algorithm.coerce(algorithm)

        hasher = hmac.new(self._secret, self.int_to_bytestring(counter), algorithm.digest)
        code = self.truncate(hasher.digest()) % 10**digits
        return str(code).rjust(digits, "0")

    @staticmethod
    def truncate(hmac_hash: bytes) -> int:
        """
        Dynamic truncation (RFC 4226 section 5.3).

        The low nibble of the last byte selects an offset; the four bytes
        starting there are read big-endian with the top bit cleared.
        """
        offset = hmac_hash[-1] & 0xF
        return (
            (hmac_hash[offset] & 0x7F) << 24
            | (hmac_hash[offset + 1] & 0xFF) << 16
            | (hmac_hash[offset + 2] & 0xFF) << 8
            | (hmac_hash[offset + 3] & 0xFF)
        )

    @staticmethod
    def int_to_bytestring(i: int, padding: int = 8) -> bytes:
        """
        Turns an integer to the OATH specified
        bytestring, which is fed to the HMAC
        along with the secret
        """
        return validate_counter(i).to_bytes(padding, "big")
