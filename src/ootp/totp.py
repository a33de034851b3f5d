import logging
from typing import Any, Optional

from . import utils
from .constants import DEFAULT_ALGORITHM, DEFAULT_DIGITS, DEFAULT_PERIOD, Algorithm
from .exceptions import InvalidCounterError
from .hotp import HOTP
from .options import CheckOption, CreateOption, MakeOption
from .otp import SecretLike
from .utils import TimeLike

log = logging.getLogger(__name__)


class TOTP(object):
    """
    Handler for time-based OTP counters.

    Wraps an ``HOTP`` engine and derives its counter from the unix time
    divided by ``period``.
    """

    def __init__(self, secret: SecretLike, option: Optional[CreateOption] = None, **overrides: Any) -> None:
        """
        :param secret: the shared secret
        :param option: a ``CreateOption``; keyword arguments ``digits``,
            ``period`` and ``algorithm`` override its fields
        """
        self._option = CreateOption.build(option, **overrides)
        self.hotp = HOTP(secret)

    @property
    def option(self) -> CreateOption:
        return self._option

    @property
    def digits(self) -> int:
        return self._option.digits

    @property
    def period(self) -> int:
        return self._option.period

    @property
    def algorithm(self) -> Algorithm:
        return self._option.algorithm

    def timecode(self, for_time: TimeLike) -> int:
        """
        :param for_time: unix seconds or a datetime
        :returns: the counter for the step containing ``for_time``
        """
        seconds = utils.to_unix_seconds(for_time)
        if seconds < 0:
            raise InvalidCounterError("time {} is before the unix epoch".format(seconds))
        return seconds // self.period

    def make(self) -> str:
        """
        Generate the current time OTP

        :returns: OTP value
        """
        return self.make_at(utils.unix_time())

    def make_at(self, for_time: TimeLike) -> str:
        """
        Accepts either a Unix timestamp integer or a datetime object.

        :param for_time: the time to generate an OTP for
        :returns: OTP value
        """
        return self.hotp.make(MakeOption(counter=self.timecode(for_time), digits=self.digits, algorithm=self.algorithm))

    def make_drift(self, steps_drift: int) -> str:
        """
        Generates the code ``steps_drift`` periods away from now; negative
        values look into the past, 0 is the same as ``make()``.
        """
        return self.make_at(utils.unix_time() + self.period * steps_drift)

    def check(self, otp: str, breadth: Optional[int] = None) -> bool:
        """
        Verifies the OTP passed in against the current time OTP.

        When ``breadth`` is not given the window is ``period`` steps on each
        side, i.e. 30 steps (15 minutes either way) with the default period.
        The period is reused as a step count for compatibility with existing
        deployments; pass an explicit breadth for a tighter window.

        :param otp: the OTP to check against
        :param breadth: counter steps accepted on each side of the current one
        """
        return self.check_at(otp, utils.unix_time(), breadth)

    def check_at(self, otp: str, for_time: TimeLike, breadth: Optional[int] = None) -> bool:
        """
        Same as ``check`` for a given time instead of the clock.
        """
        if breadth is None:
            breadth = self.period
        option = CheckOption(counter=self.timecode(for_time), breadth=breadth, algorithm=self.algorithm)
        otp = str(otp)
        if len(otp) != self.digits:
            log.debug("candidate has %d characters, configured for %d", len(otp), self.digits)
            return False
        return self.hotp.check(otp, option)

    def remaining(self, for_time: Optional[TimeLike] = None) -> int:
        """
        :returns: seconds until the code for ``for_time`` (default now) expires
        """
        seconds = utils.unix_time() if for_time is None else utils.to_unix_seconds(for_time)
        return self.period - seconds % self.period


def make(
    secret: SecretLike,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    algorithm: Any = DEFAULT_ALGORITHM,
) -> str:
    return TOTP(secret, digits=digits, period=period, algorithm=algorithm).make()


def make_at(
    secret: SecretLike,
    for_time: TimeLike,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    algorithm: Any = DEFAULT_ALGORITHM,
) -> str:
    return TOTP(secret, digits=digits, period=period, algorithm=algorithm).make_at(for_time)


def make_drift(
    secret: SecretLike,
    steps_drift: int,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    algorithm: Any = DEFAULT_ALGORITHM,
) -> str:
    return TOTP(secret, digits=digits, period=period, algorithm=algorithm).make_drift(steps_drift)


def check(
    secret: SecretLike,
    otp: str,
    digits: int = DEFAULT_DIGITS,
    period: int = DEFAULT_PERIOD,
    algorithm: Any = DEFAULT_ALGORITHM,
    breadth: Optional[int] = None,
) -> bool:
    return TOTP(secret, digits=digits, period=period, algorithm=algorithm).check(otp, breadth)
