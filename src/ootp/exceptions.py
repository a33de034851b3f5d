class OTPError(ValueError):
    """
    Base class for invalid arguments passed to the OTP engines.
    """


class InvalidSecretError(OTPError):
    pass


class InvalidDigitsError(OTPError):
    pass


class InvalidPeriodError(OTPError):
    pass


class InvalidCounterError(OTPError):
    """
    Raised for a counter outside the unsigned 64-bit range, including a
    time before the unix epoch.
    """


class InvalidBreadthError(OTPError):
    pass


class UnsupportedAlgorithmError(OTPError):
    pass
