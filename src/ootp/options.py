"""
Per-call configuration for the HOTP and TOTP engines.

Every option object is immutable, carries documented defaults for each field
and validates itself on construction, so an engine never sees an out of range
digit count, period or window.
"""
import dataclasses
from typing import Any, Optional, TypeVar

from .constants import (
    DEFAULT_ALGORITHM,
    DEFAULT_BREADTH,
    DEFAULT_COUNTER,
    DEFAULT_DIGITS,
    DEFAULT_PERIOD,
    Algorithm,
)
from .utils import validate_breadth, validate_counter, validate_digits, validate_period

_O = TypeVar("_O", bound="_Option")


class _Option(object):
    def replace(self: _O, **changes: Any) -> _O:
        """
        :returns: a copy with the given fields changed
        """
        return dataclasses.replace(self, **changes)

    @classmethod
    def build(cls: "type[_O]", option: Optional[_O] = None, **overrides: Any) -> _O:
        """
        Merges an optional base option with keyword overrides.

        ``HOTP.make(counter=3)`` and ``HOTP.make(MakeOption(counter=3))`` are
        the same call; ``None`` overrides are ignored.
        """
        overrides = {k: v for k, v in overrides.items() if v is not None}
        if option is None:
            return cls(**overrides)
        if not isinstance(option, cls):
            raise TypeError("expected {}, got {!r}".format(cls.__name__, option))
        return option.replace(**overrides) if overrides else option


@dataclasses.dataclass(frozen=True)
class MakeOption(_Option):
    """
    :param counter: HMAC counter, defaults to 0
    :param digits: length of the generated code, defaults to 6
    :param algorithm: hash used by the HMAC, defaults to SHA-1
    """

    counter: int = DEFAULT_COUNTER
    digits: int = DEFAULT_DIGITS
    algorithm: Algorithm = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        validate_counter(self.counter)
        validate_digits(self.digits)
        object.__setattr__(self, "algorithm", Algorithm.coerce(self.algorithm))


@dataclasses.dataclass(frozen=True)
class CheckOption(_Option):
    """
    :param counter: counter the window is centred on, defaults to 0
    :param breadth: steps accepted on each side of ``counter``, defaults to 0
    :param algorithm: hash used by the HMAC, defaults to SHA-1
    """

    counter: int = DEFAULT_COUNTER
    breadth: int = DEFAULT_BREADTH
    algorithm: Algorithm = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        validate_counter(self.counter)
        validate_breadth(self.breadth)
        object.__setattr__(self, "algorithm", Algorithm.coerce(self.algorithm))


@dataclasses.dataclass(frozen=True)
class CreateOption(_Option):
    """
    :param digits: length of the generated code, defaults to 6
    :param period: seconds spanned by one counter step, defaults to 30
    :param algorithm: hash used by the HMAC, defaults to SHA-1
    """

    digits: int = DEFAULT_DIGITS
    period: int = DEFAULT_PERIOD
    algorithm: Algorithm = DEFAULT_ALGORITHM

    def __post_init__(self) -> None:
        validate_digits(self.digits)
        validate_period(self.period)
        object.__setattr__(self, "algorithm", Algorithm.coerce(self.algorithm))
