"""iCalendar event generator facade."""

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from icsgen.config.types import AppConfig
from icsgen.config.utils import deep_merge
from icsgen.exceptions import ValidationError
from icsgen.models.event import EventAttributes
from icsgen.services.calendar.builders import CalendarBuilder, EventBuilder
from icsgen.services.calendar.builders.event_builder import Clock, UidFactory
from icsgen.utils.logging_utils import LoggerMixin, log_execution
from icsgen.utils.timezone_utils import TimezoneManager

DEFAULTS: dict[str, Any] = {
    'filename': 'event'
}

Attributes = EventAttributes | Mapping[str, Any] | None

class ICS(LoggerMixin):
    """Builds single-event iCalendar documents.
    
    Recognized options are ``filename`` (base name used by ``create_event``),
    ``output_dir`` (directory for ``create_event``) and ``timezone`` (IANA
    name used to read naive dates; defaults to the system zone).
    
    ``clock`` and ``uid_factory`` replace the current time and the UID
    generator, which makes output reproducible.
    """
    
    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        clock: Clock | None = None,
        uid_factory: UidFactory | None = None,
        timezone: str | None = None
    ) -> None:
        super().__init__()
        self.options = deep_merge(DEFAULTS, dict(options) if options else None)
        self.tz_manager = TimezoneManager(timezone or self.options.get('timezone'))
        self.event_builder = EventBuilder(self.tz_manager, clock=clock, uid_factory=uid_factory)
        self.calendar_builder = CalendarBuilder()
    
    @classmethod
    def from_config(cls, config: AppConfig, **kwargs: Any) -> 'ICS':
        """Create an instance from application configuration."""
        options = {
            'filename': config.filename,
            'output_dir': config.output_dir,
        }
        return cls(options, timezone=config.timezone, **kwargs)
    
    @staticmethod
    def to_attributes(attributes: Attributes) -> EventAttributes | None:
        """Normalise the accepted attribute shapes to ``EventAttributes``."""
        if attributes is None or isinstance(attributes, EventAttributes):
            return attributes
        if isinstance(attributes, Mapping):
            return EventAttributes.from_dict(attributes)
        raise ValidationError(
            "Event attributes must be a mapping or EventAttributes",
            details={"type": type(attributes).__name__}
        )
    
    @log_execution()
    def build_event(self, attributes: Attributes = None) -> str:
        """Build a VCALENDAR document holding one VEVENT.
        
        Missing or unrepresentable optional fields are left out. An empty or
        missing record gives the default event.
        
        Raises:
            InvalidDateError: If start or end is set but cannot be parsed
        """
        event_lines = self.event_builder.build(self.to_attributes(attributes))
        return self.calendar_builder.build_calendar(event_lines)
    
    @staticmethod
    def set_file_extension(dest: str | Path) -> str:
        """Append ``.ics`` unless already present."""
        return CalendarBuilder.set_file_extension(dest)
    
    def create_event(self, attributes: Attributes = None, destination: str | Path | None = None) -> Path:
        """Build an event and write it to ``destination``.
        
        Without a destination the file is ``<output_dir>/<filename>.ics``.
        
        Raises:
            CalendarWriteError: If the file cannot be written
        """
        if destination is None:
            destination = Path(self.options.get('output_dir') or '.') / self.options['filename']
        document = self.build_event(attributes)
        return self.calendar_builder.write_calendar(document, destination)
