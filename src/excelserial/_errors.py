"""Exception hierarchy for Excel serial date conversion."""


class ConversionError(Exception):
    """Base exception for serial date conversion errors.

    Provides dual messaging: a sanitized user-facing message and
    internal details for logging.
    """

    def __init__(
        self,
        user_message: str,
        internal_details: str = "",
        wrapped: Exception | None = None,
    ) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details or user_message
        self.wrapped = wrapped

    def internal(self) -> str:
        return self.internal_details


class UnsupportedTypeError(ConversionError):
    """Raised when a value is not a supported civil date/time type."""


class TimezoneNotSupportedError(ConversionError):
    """Raised when a time or datetime carries timezone information."""


class InvalidDateSystemError(ConversionError):
    """Raised when an unknown date system is requested."""


class InvalidSerialError(ConversionError):
    """Raised when a serial value cannot be mapped back to a civil value."""


class NonexistentDateError(InvalidSerialError):
    """Raised for the serial of the phantom 1900-02-29."""


# Sanitized user-facing error message constants
ERR_MSG_UNSUPPORTED_TYPE = "unsupported type"
ERR_MSG_TIMEZONE_NOT_SUPPORTED = "timezone-aware values are not supported"
ERR_MSG_INVALID_DATE_SYSTEM = "invalid date system"
ERR_MSG_INVALID_SERIAL = "invalid serial value"
ERR_MSG_NONEXISTENT_DATE = "serial value refers to a nonexistent date"
