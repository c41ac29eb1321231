"""Logging configuration utilities."""

import json
import logging
import os
import sys
from datetime import datetime

from icsgen.config.types import AppConfig


class JsonFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def __init__(self, include_timestamp: bool = True):
        """Initialize formatter.
        
        Args:
            include_timestamp: Whether to include timestamp in output
        """
        self.include_timestamp = include_timestamp
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as a single JSON object."""
        message = record.getMessage()
        data = {
            'level': record.levelname,
            'logger': record.name,
            'message': message
        }

        # LoggerMixin appends " | Context: k=v | k=v"; lift it into fields
        if " | Context: " in message:
            text, _, context = message.partition(" | Context: ")
            data['message'] = text
            for pair in context.split(" | "):
                key, sep, value = pair.partition("=")
                if sep:
                    data[key] = value

        if self.include_timestamp:
            data['timestamp'] = datetime.fromtimestamp(record.created).isoformat()

        if record.exc_info:
            data['exception'] = self.formatException(record.exc_info)

        return json.dumps(data)

class ColoredFormatter(logging.Formatter):
    """Formatter that adds color to console output."""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        """Format log record with color."""
        color = self.COLORS.get(record.levelname, self.RESET)
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S,%f')[:-3]
        msg = record.getMessage()
        
        if record.exc_info:
            msg = f"{msg}\n{self.formatException(record.exc_info)}"
        
        return f"{color}{timestamp} - {record.name} - {record.levelname} - {msg}{self.RESET}"

def get_console_handler(formatter: logging.Formatter) -> logging.StreamHandler:
    """Create console handler writing to stderr, keeping stdout for documents."""
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    return console_handler

def get_file_handler(log_file: str, formatter: logging.Formatter) -> logging.FileHandler:
    """Create file handler, creating the log directory if needed."""
    log_dir = os.path.dirname(log_file)
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setFormatter(formatter)
    return file_handler

def setup_logging(
    config: AppConfig | None = None,
    dev_mode: bool = False,
    verbose: bool = False,
    log_file: str | None = None
) -> None:
    """Set up logging for the command line application.
    
    Args:
        config: Application configuration; supplies level, format and log file
        dev_mode: Log everything at DEBUG
        verbose: Log at INFO at least
        log_file: Log file path, overriding the configured one
    """
    if dev_mode:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = getattr(logging, str(config.log_level if config else 'WARNING').upper())
    
    use_json = bool(config and config.log_format == 'json')
    log_file = log_file or (config.log_file if config else None)
    
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    
    console_formatter = JsonFormatter() if use_json else ColoredFormatter()
    root_logger.addHandler(get_console_handler(console_formatter))
    
    if log_file:
        file_handler = get_file_handler(
            log_file,
            JsonFormatter() if use_json else logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            )
        )
        file_handler.setLevel(logging.DEBUG)
        root_logger.addHandler(file_handler)
    
    # Keep third-party libraries quiet unless debugging
    for library in ('icalendar', 'yaml'):
        logging.getLogger(library).setLevel(logging.DEBUG if dev_mode else logging.WARNING)
