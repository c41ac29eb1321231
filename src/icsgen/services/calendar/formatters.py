"""Property formatters for VEVENT fields.

Each formatter returns a property line, a list of lines, or None when the
field cannot be represented. None entries are dropped before the document is
joined. Formatters never raise.
"""

import math
import re
from decimal import Decimal
from collections.abc import Callable, Sequence
from typing import Any

from icsgen.models.event import Attendee, Geo, Person

STATUSES = ('TENTATIVE', 'CONFIRMED', 'CANCELLED')

def escape_line_breaks(value: str) -> str:
    """Replace CR/LF sequences with the iCalendar ``\\n`` escape."""
    return value.replace('\r\n', '\\n').replace('\r', '\\n').replace('\n', '\\n')

def format_property(key: str, value: Any) -> str | None:
    """``KEY:value`` when value is truthy."""
    if value:
        return f"{key}:{escape_line_breaks(str(value))}"
    return None

def format_uid(uid: str | None, uid_factory: Callable[[], str]) -> str:
    """UID line; a fresh token is generated when no uid is given."""
    if uid:
        return f"UID:{escape_line_breaks(str(uid))}"
    return f"UID:{uid_factory()}"

def format_status(status: Any) -> str | None:
    """STATUS line for TENTATIVE, CONFIRMED or CANCELLED in any case; input case is kept."""
    if isinstance(status, str) and status.upper() in STATUSES:
        return f"STATUS:{status}"
    return None

# leading number of a string, the rest is ignored ("37abc" reads as 37)
NUMBER_PREFIX = re.compile(r'\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')

def _parse_coordinate(value: Any) -> float | None:
    if isinstance(value, str):
        match = NUMBER_PREFIX.match(value)
        if match is None:
            return None
        value = match.group()
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(number) or math.isinf(number):
        return None
    return number

def format_number(value: float) -> str:
    """Render a float the way a plain number prints.

    Integral values drop ``.0``. Magnitudes from 1e-6 up to 1e21 print in
    positional form, anything else as ``1e-7`` / ``1.5e+21``.
    """
    if value == 0:
        return '0'
    sign = '-' if value < 0 else ''
    _, digits, exponent = Decimal(repr(abs(value))).normalize().as_tuple()
    # position of the decimal point relative to the first digit
    point = len(digits) + exponent
    if -6 < point <= 21:
        return sign + format(Decimal(repr(abs(value))).normalize(), 'f')
    mantissa = str(digits[0])
    if len(digits) > 1:
        mantissa += '.' + ''.join(str(d) for d in digits[1:])
    return f"{sign}{mantissa}e{'+' if point > 0 else '-'}{abs(point - 1)}"

def format_geo(geo: Geo | None) -> str | None:
    """GEO line when both coordinates are present, non-zero and numeric."""
    if geo is None or not geo.lat or not geo.lon:
        return None
    lat = _parse_coordinate(geo.lat)
    lon = _parse_coordinate(geo.lon)
    if lat is None or lon is None:
        return None
    return f"GEO:{format_number(lat)};{format_number(lon)}"

def _format_person(key: str, person: Person | None) -> str | None:
    if person is None or not person.name or not person.email:
        return None
    return f"{key};CN={escape_line_breaks(str(person.name))}:mailto:{escape_line_breaks(str(person.email))}"

def format_organizer(organizer: Person | None) -> str | None:
    """ORGANIZER line; needs both name and email."""
    return _format_person('ORGANIZER', organizer)

def format_attendees(attendees: Sequence[Attendee | None] | None) -> list[str | None] | None:
    """One ATTENDEE line per entry; entries without name or email map to None."""
    if attendees is None:
        return None
    return [_format_person('ATTENDEE', attendee) for attendee in attendees]

def format_categories(categories: Sequence[Any] | None) -> str | None:
    """Single CATEGORIES line, values joined with commas; commas are not escaped."""
    if not categories:
        return None
    return 'CATEGORIES:' + ','.join(
        '' if category is None else escape_line_breaks(str(category)) for category in categories
    )

def format_attachments(attachments: Sequence[Any] | None) -> list[str | None] | None:
    """One ATTACH line per path or URI, in order; empty entries map to None."""
    if attachments is None:
        return None
    return [f"ATTACH:{escape_line_breaks(str(path))}" if path else None for path in attachments]
