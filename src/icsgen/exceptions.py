"""Centralized error definitions for the iCalendar generator."""

from dataclasses import dataclass
from typing import Any

from icsgen.error_codes import ErrorCode


@dataclass
class IcsGenError(Exception):
    """Base exception for all icsgen errors."""
    message: str
    code: ErrorCode
    details: dict[str, Any] | None = None
    
    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Code: {self.code.value}, Details: {self.details})"
        return f"{self.message} (Code: {self.code.value})"

class ConfigError(IcsGenError):
    """Configuration error."""
    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CONFIG_INVALID, details)

class ValidationError(IcsGenError):
    """Validation error."""
    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VALIDATION_FAILED,
        details: dict[str, Any] | None = None
    ):
        super().__init__(message, code, details)

class InvalidDateError(ValidationError):
    """A start or end value that cannot be read as a date."""
    def __init__(self, message: str, field: str, value: str):
        super().__init__(message, ErrorCode.INVALID_DATE, {"field": field, "value": value})

class CalendarError(IcsGenError):
    """Calendar output error."""
    def __init__(self, message: str, code: ErrorCode = ErrorCode.SERVICE_ERROR, details: dict[str, Any] | None = None):
        super().__init__(message, code, details)

class CalendarWriteError(CalendarError):
    """Calendar write error."""
    def __init__(self, message: str, file_path: str):
        super().__init__(message, ErrorCode.WRITE_FAILED, {"file_path": file_path})
