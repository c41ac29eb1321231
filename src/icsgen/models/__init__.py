"""
Models package for the iCalendar generator.
"""

from .event import Attendee, EventAttributes, Geo, Person

__all__ = ['Attendee', 'EventAttributes', 'Geo', 'Person']
