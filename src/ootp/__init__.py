from . import hotp, totp  # noqa:F401
from .constants import (
    DEFAULT_ALGORITHM as DEFAULT_ALGORITHM,
    DEFAULT_BREADTH as DEFAULT_BREADTH,
    DEFAULT_COUNTER as DEFAULT_COUNTER,
    DEFAULT_DIGITS as DEFAULT_DIGITS,
    DEFAULT_PERIOD as DEFAULT_PERIOD,
    MAX_DIGITS as MAX_DIGITS,
    Algorithm as Algorithm,
)
from .exceptions import (
    InvalidBreadthError as InvalidBreadthError,
    InvalidCounterError as InvalidCounterError,
    InvalidDigitsError as InvalidDigitsError,
    InvalidPeriodError as InvalidPeriodError,
    InvalidSecretError as InvalidSecretError,
    OTPError as OTPError,
    UnsupportedAlgorithmError as UnsupportedAlgorithmError,
)
from .hotp import HOTP as HOTP
from .options import CheckOption as CheckOption, CreateOption as CreateOption, MakeOption as MakeOption
from .otp import OTP as OTP
from .totp import TOTP as TOTP

__version__ = "0.2.0"
