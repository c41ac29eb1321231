"""
Event attribute models.
"""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, fields
from typing import Any, TypeVar

from icsgen.utils.date_utils import as_date_string

logger = logging.getLogger(__name__)

M = TypeVar('M')

@dataclass
class Geo:
    """Geographic position; values may be numbers or numeric strings."""
    lat: Any = None
    lon: Any = None

@dataclass
class Person:
    """Named calendar user with an email address."""
    name: str | None = None
    email: str | None = None

@dataclass
class Attendee(Person):
    """Event attendee. ``rsvp`` is accepted but not rendered."""
    rsvp: bool | None = None

def _from_mapping(cls: type[M], value: Any) -> M | None:
    """Build ``cls`` from a mapping, passing instances through and dropping anything else."""
    if isinstance(value, cls):
        return value
    if isinstance(value, Mapping):
        names = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in value.items() if k in names})
    return None

def _as_list(value: Any) -> list[Any] | None:
    if isinstance(value, str):
        return [value]
    if isinstance(value, Iterable) and not isinstance(value, Mapping):
        return list(value)
    return None

@dataclass
class EventAttributes:
    """Attribute record describing a single event.
    
    Every field is optional. ``start`` and ``end`` are kept as text because
    whether a value is a bare date or a date-time is decided from its text.
    """
    uid: str | None = None
    start: str | None = None
    end: str | None = None
    title: str | None = None
    description: str | None = None
    location: str | None = None
    url: str | None = None
    status: str | None = None
    geo: Geo | None = None
    organizer: Person | None = None
    attendees: list[Attendee | None] | None = None
    categories: list[str] | None = None
    attachments: list[str] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'EventAttributes':
        """Create an attribute record from a loosely-typed mapping.
        
        Unknown keys are ignored. Sub-records that are neither mappings nor
        the matching model are treated as absent.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(str(k) for k in data if k not in known)
        if unknown:
            logger.debug(f"Ignoring unknown event attributes: {', '.join(unknown)}")

        attendees = _as_list(data.get('attendees'))
        return cls(
            uid=data.get('uid'),
            start=as_date_string(data.get('start')),
            end=as_date_string(data.get('end')),
            title=data.get('title'),
            description=data.get('description'),
            location=data.get('location'),
            url=data.get('url'),
            status=data.get('status'),
            geo=_from_mapping(Geo, data.get('geo')),
            organizer=_from_mapping(Person, data.get('organizer')),
            attendees=[_from_mapping(Attendee, a) for a in attendees] if attendees is not None else None,
            categories=_as_list(data.get('categories')),
            attachments=_as_list(data.get('attachments')),
        )

    def is_empty(self) -> bool:
        """True when no field is set."""
        return all(getattr(self, f.name) is None for f in fields(self))
