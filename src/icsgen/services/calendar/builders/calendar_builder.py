"""
Calendar builder wrapping VEVENT lines in a VCALENDAR document.
"""

from collections.abc import Sequence
from pathlib import Path

from icsgen.exceptions import CalendarWriteError
from icsgen.utils.logging_utils import LoggerMixin

PRODID = '-//icsgen//icsgen//ICS: iCalendar Generator'

HEADER_LINES = (
    'BEGIN:VCALENDAR',
    'VERSION:2.0',
    'CALSCALE:GREGORIAN',
    f'PRODID:{PRODID}',
)

LINE_DELIMITER = '\r\n'

FILE_EXTENSION = '.ics'


class CalendarBuilder(LoggerMixin):
    """Builder for calendar documents."""
    
    def __init__(self) -> None:
        """Initialize calendar builder."""
        super().__init__()
        self.set_log_context(service="calendar_builder")
    
    def build_calendar(self, event_lines: Sequence[str]) -> str:
        """Join header, event lines and footer with CRLF."""
        return LINE_DELIMITER.join([*HEADER_LINES, *event_lines, 'END:VCALENDAR'])
    
    @staticmethod
    def set_file_extension(dest: str | Path) -> str:
        """Append ``.ics`` unless the destination already ends with it."""
        dest = str(dest)
        return dest if dest[-len(FILE_EXTENSION):] == FILE_EXTENSION else dest + FILE_EXTENSION
    
    def write_calendar(self, document: str, dest: str | Path) -> Path:
        """Write a calendar document to ``dest`` with the ``.ics`` extension.
        
        Returns:
            Path of the written file
            
        Raises:
            CalendarWriteError: If the file cannot be written
        """
        file_path = Path(self.set_file_extension(dest))
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            
            # newline='' keeps the CRLF delimiters as written
            with open(file_path, 'w', encoding='utf-8', newline='') as f:
                f.write(document)
            
            self.info(f"Created calendar file: {file_path}", bytes=len(document.encode('utf-8')))
            return file_path
            
        except OSError as e:
            self.error("Failed to write calendar file", exc_info=e)
            raise CalendarWriteError(f"Failed to write calendar file: {e}", str(file_path)) from e
