"""
Services package for the iCalendar generator.
"""

from icsgen.services.calendar.builders import CalendarBuilder, EventBuilder

__all__ = ['CalendarBuilder', 'EventBuilder']
