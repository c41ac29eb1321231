"""Error codes for the iCalendar generator."""

from enum import Enum

class ErrorCode(Enum):
    """Enumeration of all possible error codes."""
    # Data Errors
    INVALID_DATE = "invalid_date"
    VALIDATION_FAILED = "validation_failed"

    # Configuration Errors
    CONFIG_INVALID = "config_invalid"

    # Output Errors
    WRITE_FAILED = "write_failed"
    SERVICE_ERROR = "service_error"
