import logging
from typing import Any, Optional, Union

from .constants import DEFAULT_ALGORITHM, DEFAULT_BREADTH, DEFAULT_COUNTER, DEFAULT_DIGITS, MAX_COUNTER, MAX_DIGITS
from .options import CheckOption, MakeOption
from .otp import OTP, SecretLike
from . import utils

log = logging.getLogger(__name__)


class HOTP(OTP):
    """
    Handler for HMAC-based OTP counters.

    >>> hotp = HOTP(b"12345678901234567890")
    >>> hotp.make(counter=1)
    '287082'
    """

    def make(self, option: Union[MakeOption, int, None] = None, **overrides: Any) -> str:
        """
        Generates the OTP for a counter.

        :param option: a ``MakeOption``, or the counter as an int; keyword
            arguments ``counter``, ``digits`` and ``algorithm`` override it
        :returns: OTP
        """
        if isinstance(option, int) and not isinstance(option, bool):
            overrides.setdefault("counter", option)
            option = None
        option = MakeOption.build(option, **overrides)
        return self.generate_otp(option.counter, option.digits, option.algorithm)

    def at(self, count: int, digits: int = DEFAULT_DIGITS, algorithm: Any = DEFAULT_ALGORITHM) -> str:
        """
        Generates the OTP for the given count.

        :param count: the OTP HMAC counter
        :returns: OTP
        """
        return self.generate_otp(count, digits, algorithm)

    def check(self, otp: str, option: Optional[CheckOption] = None, **overrides: Any) -> bool:
        """
        Verifies an OTP against a window of counters.

        The code length is taken from ``otp`` itself, so a candidate of the
        wrong length never matches.

        :param otp: the OTP to check against
        :param option: a ``CheckOption``; keyword arguments ``counter``,
            ``breadth`` and ``algorithm`` override its fields
        """
        return self.match(otp, option, **overrides) is not None

    def match(self, otp: str, option: Optional[CheckOption] = None, **overrides: Any) -> Optional[int]:
        """
        Like ``check`` but returns the counter that produced ``otp``, or None.

        Counters are tried in ascending order from ``counter - breadth`` to
        ``counter + breadth``. The window is clamped to ``[0, 2**64 - 1]``
        rather than wrapping around. Callers doing replay protection should
        store the returned counter and refuse anything at or below it.
        """
        option = CheckOption.build(option, **overrides)
        otp = str(otp)
        if not 0 < len(otp) <= MAX_DIGITS or not (otp.isascii() and otp.isdigit()):
            log.debug("rejecting malformed candidate of length %d", len(otp))
            return None

        low = option.counter - option.breadth
        high = option.counter + option.breadth
        if low < 0 or high > MAX_COUNTER:
            log.debug("clamping window [%d, %d] to the 64-bit counter range", low, high)
            low, high = max(low, 0), min(high, MAX_COUNTER)

        for counter in range(low, high + 1):
            if utils.strings_equal(otp, self.generate_otp(counter, len(otp), option.algorithm)):
                return counter
        return None


def make(
    secret: SecretLike,
    counter: int = DEFAULT_COUNTER,
    digits: int = DEFAULT_DIGITS,
    algorithm: Any = DEFAULT_ALGORITHM,
) -> str:
    return HOTP(secret).make(counter=counter, digits=digits, algorithm=algorithm)


def check(
    secret: SecretLike,
    otp: str,
    counter: int = DEFAULT_COUNTER,
    breadth: int = DEFAULT_BREADTH,
    algorithm: Any = DEFAULT_ALGORITHM,
) -> bool:
    return HOTP(secret).check(otp, counter=counter, breadth=breadth, algorithm=algorithm)
