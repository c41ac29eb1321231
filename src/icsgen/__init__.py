"""
iCalendar event generator.
"""

__version__ = '0.1.0'

from .exceptions import (
    CalendarError,
    CalendarWriteError,
    ConfigError,
    IcsGenError,
    InvalidDateError,
    ValidationError,
)
from .ics import DEFAULTS, ICS
from .models import Attendee, EventAttributes, Geo, Person

__all__ = [
    'DEFAULTS',
    'ICS',
    'Attendee',
    'CalendarError',
    'CalendarWriteError',
    'ConfigError',
    'EventAttributes',
    'Geo',
    'IcsGenError',
    'InvalidDateError',
    'Person',
    'ValidationError'
]
