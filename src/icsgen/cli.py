"""
Command line interface for the iCalendar generator.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

import yaml
from tabulate import tabulate

from icsgen import __version__
from icsgen.config.logging import setup_logging
from icsgen.config.settings import ConfigurationManager
from icsgen.exceptions import IcsGenError, ValidationError
from icsgen.ics import ICS
from icsgen.services.calendar.builders.calendar_builder import LINE_DELIMITER
from icsgen.utils.logging_utils import get_logger

SCALAR_FIELDS = ('uid', 'title', 'description', 'location', 'url', 'status', 'start', 'end')

def load_attributes_file(path: str | Path) -> dict[str, Any]:
    """Read an attribute record from a JSON or YAML file.
    
    Raises:
        ValidationError: If the file cannot be read or is not a mapping
    """
    path = Path(path)
    try:
        with open(path, encoding='utf-8') as f:
            if path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(f"Cannot read attributes from {path}", details={"error": str(e)}) from e
    
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(
            f"Attributes file {path} must contain a mapping",
            details={"type": type(data).__name__}
        )
    return data

def collect_attributes(args: argparse.Namespace) -> dict[str, Any]:
    """Merge the attributes file with field options; options win."""
    attributes = load_attributes_file(args.input) if args.input else {}
    
    for field in SCALAR_FIELDS:
        value = getattr(args, field)
        if value is not None:
            attributes[field] = value
    
    if args.lat is not None or args.lon is not None:
        geo = dict(attributes.get('geo') or {})
        if args.lat is not None:
            geo['lat'] = args.lat
        if args.lon is not None:
            geo['lon'] = args.lon
        attributes['geo'] = geo
    
    if args.organizer:
        name, email = args.organizer
        attributes['organizer'] = {'name': name, 'email': email}
    if args.attendee:
        attributes['attendees'] = [{'name': name, 'email': email} for name, email in args.attendee]
    if args.category:
        attributes['categories'] = args.category
    if args.attach:
        attributes['attachments'] = args.attach
    
    return attributes

def format_table(document: str) -> str:
    """Render a calendar document as a property/value table."""
    rows = [line.partition(':')[::2] for line in document.split(LINE_DELIMITER)]
    return tabulate(rows, headers=['Property', 'Value'], tablefmt='simple')

def build_command(ics: ICS, args: argparse.Namespace) -> int:
    """Build an event and print or write it."""
    attributes = collect_attributes(args)
    
    if args.output:
        path = ics.create_event(attributes, args.output)
        print(f"Created calendar file: {path}")
        return 0
    
    document = ics.build_event(attributes)
    if args.format == 'table':
        print(format_table(document))
    else:
        sys.stdout.write(document + LINE_DELIMITER)
    return 0

def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog='icsgen',
        description='Generate iCalendar (.ics) documents for single events'
    )
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    parser.add_argument('--dev', action='store_true', help='Development mode (debug logging)')
    parser.add_argument('-v', '--verbose', action='store_true', help='Verbose logging')
    parser.add_argument('--log-file', help='Write logs to this file')
    parser.add_argument('--config-dir', help='Directory holding config.yaml')
    
    subparsers = parser.add_subparsers(dest='command', help='Command to run')
    
    build = subparsers.add_parser('build', help='Build a calendar document for one event')
    build.add_argument('-i', '--input', help='JSON or YAML file with event attributes')
    build.add_argument('-o', '--output', help='Write to this file (.ics is appended if missing)')
    build.add_argument('--format', choices=['ics', 'table'], default='ics', help='Output format for stdout (default: ics)')
    build.add_argument('--uid', help='Event UID (generated when omitted)')
    build.add_argument('--title', help='Event summary')
    build.add_argument('--description', help='Event description')
    build.add_argument('--location', help='Event location')
    build.add_argument('--url', help='Event URL')
    build.add_argument('--status', help='TENTATIVE, CONFIRMED or CANCELLED')
    build.add_argument('--start', help='Start date (1985-09-25) or date-time (2017-09-25T02:30:00Z)')
    build.add_argument('--end', help='End date or date-time')
    build.add_argument('--lat', type=float, help='Latitude')
    build.add_argument('--lon', type=float, help='Longitude')
    build.add_argument('--organizer', nargs=2, metavar=('NAME', 'EMAIL'), help='Event organizer')
    build.add_argument('--attendee', nargs=2, action='append', metavar=('NAME', 'EMAIL'), help='Attendee (repeatable)')
    build.add_argument('--category', action='append', help='Category (repeatable)')
    build.add_argument('--attach', action='append', help='Attachment path or URI (repeatable)')
    
    return parser

def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)
    
    if not args.command:
        parser.print_help()
        return 1
    
    logger = get_logger(__name__)
    try:
        config = ConfigurationManager().reload_config(args.config_dir)
        setup_logging(config, dev_mode=args.dev, verbose=args.verbose, log_file=args.log_file)
        
        ics = ICS.from_config(config)
        return build_command(ics, args)
    
    except IcsGenError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

if __name__ == '__main__':
    sys.exit(main())
