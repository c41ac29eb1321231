"""Tests for the VEVENT builder."""

from datetime import datetime, timezone

import pytest

from icsgen.exceptions import InvalidDateError
from icsgen.models.event import EventAttributes
from icsgen.services.calendar.builders.calendar_builder import CalendarBuilder, HEADER_LINES
from icsgen.services.calendar.builders.event_builder import EventBuilder, compact, generate_uid
from icsgen.utils.timezone_utils import TimezoneManager

NOW = datetime(2024, 6, 30, 12, 0, 7, tzinfo=timezone.utc)

@pytest.fixture
def builder(fixed_clock, fixed_uid):
    return EventBuilder(TimezoneManager('UTC'), clock=fixed_clock, uid_factory=fixed_uid)

def test_compact():
    assert compact(['a', None, ['b', None, 'c'], '', None, ['d']]) == ['a', 'b', 'c', 'd']

def test_generate_uid_is_unique():
    assert generate_uid() != generate_uid()

def test_build_wraps_vevent(builder):
    event_lines = builder.build(EventAttributes(title='Lunch'))
    assert event_lines[0] == 'BEGIN:VEVENT'
    assert event_lines[-1] == 'END:VEVENT'
    assert event_lines[1:5] == [
        'UID:fixed-uid',
        'DTSTAMP:20240131T233045Z',
        'DTSTART;VALUE=DATE:20240131',
        'DTEND;VALUE=DATE:20240201',
    ]
    assert 'SUMMARY:Lunch' in event_lines

def test_build_default_event(builder):
    assert builder.build(None) == [
        'BEGIN:VEVENT',
        'UID:fixed-uid',
        'DTSTAMP:20240131T233045Z',
        'DTSTART;VALUE=DATE:20240131',
        'DTEND;VALUE=DATE:20240201',
        'END:VEVENT',
    ]

@pytest.mark.parametrize('start,expected', [
    (None, 'DTSTART;VALUE=DATE:20240630'),
    ('', 'DTSTART;VALUE=DATE:20240630'),
    ('1985-09-25', 'DTSTART;VALUE=DATE:19850925'),
    ('2017-09-25T02:30:59Z', 'DTSTART:20170925T023000Z'),
    ('2017-09-25T02:30:00+02:00', 'DTSTART:20170925T003000Z'),
])
def test_format_dtstart(builder, start, expected):
    assert builder.format_dtstart(start, NOW) == expected

@pytest.mark.parametrize('start,end,expected', [
    # no start: tomorrow
    (None, None, 'DTEND;VALUE=DATE:20240701'),
    (None, '1985-09-26', 'DTEND;VALUE=DATE:20240701'),
    # bare date start with end: end's calendar date
    ('1985-09-25', '1985-09-28', 'DTEND;VALUE=DATE:19850928'),
    ('1985-09-25', '1985-09-28T23:59:59Z', 'DTEND;VALUE=DATE:19850928'),
    # date-time start with end: end in UTC with seconds
    ('2017-09-25T02:30:00Z', '2017-09-25T03:15:09Z', 'DTEND:20170925T031509Z'),
    ('2017-09-25T02:30:00Z', '2017-09-26', 'DTEND:20170926T000000Z'),
    # bare date start, no end: next day
    ('1985-09-30', None, 'DTEND;VALUE=DATE:19851001'),
    # date-time start, no end: the start instant
    ('2017-09-25T02:30:09Z', None, 'DTEND:20170925T023009Z'),
])
def test_format_dtend(builder, start, end, expected):
    assert builder.format_dtend(start, end, NOW) == expected

def test_stray_t_reads_as_date_time(builder):
    # "Tue" contains an uppercase T, so the value is read as a date-time
    assert builder.format_dtstart('Tue 1985-09-24', NOW) == 'DTSTART:19850924T000000Z'

def test_invalid_start_raises(builder):
    with pytest.raises(InvalidDateError):
        builder.format_dtstart('someday', NOW)

def test_naive_clock_is_local(fixed_uid):
    builder = EventBuilder(
        TimezoneManager('Europe/Helsinki'),
        clock=lambda: datetime(2024, 1, 1, 1, 0, 0),
        uid_factory=fixed_uid
    )
    event_lines = builder.build(None)
    assert 'DTSTAMP:20231231T230000Z' in event_lines
    assert 'DTSTART;VALUE=DATE:20240101' in event_lines

def test_calendar_builder_wraps_and_joins():
    document = CalendarBuilder().build_calendar(['BEGIN:VEVENT', 'END:VEVENT'])
    assert document.split('\r\n') == [*HEADER_LINES, 'BEGIN:VEVENT', 'END:VEVENT', 'END:VCALENDAR']
    assert not document.endswith('\r\n')
