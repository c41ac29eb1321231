"""Event builder for VEVENT components."""

import uuid
from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import Any

from icsgen.models.event import EventAttributes
from icsgen.services.calendar.formatters import (
    format_attachments,
    format_attendees,
    format_categories,
    format_geo,
    format_organizer,
    format_property,
    format_status,
    format_uid,
)
from icsgen.utils.date_utils import (
    add_days,
    as_date_string,
    format_local_date,
    format_utc_datetime,
    is_date_time,
    local_date,
    parse_date_string,
)
from icsgen.utils.logging_utils import LoggerMixin
from icsgen.utils.timezone_utils import TimezoneManager

Clock = Callable[[], datetime]
UidFactory = Callable[[], str]

def generate_uid() -> str:
    """Generate a time-based unique token."""
    return str(uuid.uuid1())

def compact(entries: Iterable[Any]) -> list[str]:
    """Flatten one level of line lists and drop empty entries."""
    lines: list[str] = []
    for entry in entries:
        if isinstance(entry, list):
            lines.extend(line for line in entry if line)
        elif entry:
            lines.append(entry)
    return lines

def _date_text(value: Any) -> str | None:
    value = as_date_string(value)
    if not value:
        return None
    return str(value)

class EventBuilder(LoggerMixin):
    """Builds the lines of a single VEVENT from an attribute record.
    
    The clock and the UID factory are the only outside inputs, so two builds
    with the same attributes, clock and UID produce identical lines.
    """
    
    def __init__(
        self,
        tz_manager: TimezoneManager | None = None,
        clock: Clock | None = None,
        uid_factory: UidFactory | None = None
    ) -> None:
        """Initialize builder."""
        super().__init__()
        self.tz_manager = tz_manager or TimezoneManager()
        self.clock = clock or self.tz_manager.utc_now
        self.uid_factory = uid_factory or generate_uid
        self.set_log_context(service="event_builder")
    
    def build(self, attributes: EventAttributes | None) -> list[str]:
        """Build VEVENT lines, from BEGIN:VEVENT to END:VEVENT.
        
        Raises:
            InvalidDateError: If start or end is set but cannot be parsed
        """
        now = self.tz_manager.localize_datetime(self.clock())
        
        if attributes is None or attributes.is_empty():
            self.debug("No attributes given, building default event")
            return self._build_default_event(now)
        
        lines = compact([
            'BEGIN:VEVENT',
            format_uid(attributes.uid, self.uid_factory),
            'DTSTAMP:' + format_utc_datetime(now, with_seconds=True),
            self.format_dtstart(attributes.start, now),
            self.format_dtend(attributes.start, attributes.end, now),
            format_property('SUMMARY', attributes.title),
            format_property('DESCRIPTION', attributes.description),
            format_property('LOCATION', attributes.location),
            format_property('URL', attributes.url),
            format_status(attributes.status),
            format_geo(attributes.geo),
            format_attendees(attributes.attendees),
            format_organizer(attributes.organizer),
            format_categories(attributes.categories),
            format_attachments(attributes.attachments),
            'END:VEVENT'
        ])
        self.debug("Built event", lines=len(lines))
        return lines
    
    def _build_default_event(self, now: datetime) -> list[str]:
        return [
            'BEGIN:VEVENT',
            format_uid(None, self.uid_factory),
            'DTSTAMP:' + format_utc_datetime(now, with_seconds=True),
            self.format_dtstart(None, now),
            self.format_dtend(None, None, now),
            'END:VEVENT'
        ]
    
    def _parse(self, value: str, field: str) -> datetime:
        return parse_date_string(value, self.tz_manager, field)
    
    def _date_line(self, key: str, value: date) -> str:
        return f"{key};VALUE=DATE:{format_local_date(value)}"
    
    def format_dtstart(self, start: Any, now: datetime) -> str:
        """DTSTART as a local date, or as a UTC date-time with seconds zeroed."""
        start = _date_text(start)
        if not start:
            return self._date_line('DTSTART', local_date(now, self.tz_manager))
        
        if is_date_time(start):
            self.debug("Start read as date-time", start=start)
            return 'DTSTART:' + format_utc_datetime(self._parse(start, 'start'))
        
        self.debug("Start read as date", start=start)
        return self._date_line('DTSTART', self._parse(start, 'start').date())
    
    def format_dtend(self, start: Any, end: Any, now: datetime) -> str:
        """DTEND following the form of DTSTART.
        
        Without an end, a bare-date start ends one day later and a date-time
        start ends at the start instant. Without a start, the event ends
        tomorrow.
        """
        start = _date_text(start)
        end = _date_text(end)
        
        if not start:
            return self._date_line('DTEND', add_days(local_date(now, self.tz_manager), 1))
        
        start_is_date_time = is_date_time(start)
        
        if end and not start_is_date_time:
            return self._date_line('DTEND', self._parse(end, 'end').date())
        
        if end:
            return 'DTEND:' + format_utc_datetime(self._parse(end, 'end'), with_seconds=True)
        
        if not start_is_date_time:
            return self._date_line('DTEND', add_days(self._parse(start, 'start').date(), 1))
        
        return 'DTEND:' + format_utc_datetime(self._parse(start, 'start'), with_seconds=True)
