"""
Instant parsing, conversion and formatting.

An Instant is a timezone-aware ``datetime``. Text is parsed with
``dateutil`` so both RFC-2822-style ("04 Dec 1995 00:12:00 UTC") and
ISO-8601 ("2024-01-30T00:00:00.000Z") forms are accepted. Text without an
explicit offset is read as UTC.

The RFC-2822 zone names (UT, GMT, EST/EDT, CST/CDT, MST/MDT, PST/PDT) are
resolved to their fixed offsets; any other zone name is rejected rather
than read as UTC. "GMT+0200" means two hours ahead of UTC, as in the text
produced by JavaScript's Date.toString().
"""

import logging
import re
import warnings
from datetime import date, datetime, time, timedelta, timezone
from typing import Mapping, Union

from dateutil import parser as date_parser
from dateutil import tz
from dateutil.parser import UnknownTimezoneWarning

from datecalc.core.calendar import DAY_NAMES, Weekday
from datecalc.core.errors import InvalidArgument, ParseError
from datecalc.products.schema import DatePeriod

logger = logging.getLogger(__name__)


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
MS_PER_DAY = 24 * 60 * 60 * 1000

# Fields missing from the text are taken from here
_PARSE_DEFAULT = datetime(1970, 1, 1)

RFC2822_ZONES = {
    "UT": tz.tzoffset("UT", 0),
    "GMT": tz.tzoffset("GMT", 0),
    "EST": tz.tzoffset("EST", -5 * 3600),
    "EDT": tz.tzoffset("EDT", -4 * 3600),
    "CST": tz.tzoffset("CST", -6 * 3600),
    "CDT": tz.tzoffset("CDT", -5 * 3600),
    "MST": tz.tzoffset("MST", -7 * 3600),
    "MDT": tz.tzoffset("MDT", -6 * 3600),
    "PST": tz.tzoffset("PST", -8 * 3600),
    "PDT": tz.tzoffset("PDT", -7 * 3600),
}

# dateutil reads "GMT+0200" with the POSIX (inverted) sign, so the zone
# name in front of a signed offset is dropped before parsing
_ZONE_BEFORE_OFFSET = re.compile(r"\b(?:GMT|UTC|UT)(?=[+-]\d)")
# Comments, e.g. "(Central European Standard Time)"
_COMMENT = re.compile(r"\([^)]*\)")

PeriodLike = Union[DatePeriod, Mapping[str, str]]


def parse_instant(text: str) -> datetime:
    """
    Parse free-form date/time text into a UTC Instant.
    
    Args:
        text: Date and time, RFC-2822-style or ISO-8601
        
    Returns:
        Timezone-aware datetime in UTC
        
    Raises:
        ParseError: If the text is not a recognizable date representation
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected date text, got {type(text).__name__}")
    
    cleaned = _ZONE_BEFORE_OFFSET.sub("", _COMMENT.sub(" ", text))

    with warnings.catch_warnings():
        warnings.simplefilter("error", UnknownTimezoneWarning)
        try:
            parsed = date_parser.parse(cleaned, default=_PARSE_DEFAULT, tzinfos=RFC2822_ZONES)
        except UnknownTimezoneWarning as exc:
            raise ParseError(f"Unknown time zone in {text!r}") from exc
        except (ValueError, OverflowError) as exc:
            raise ParseError(f"Unrecognized date: {text!r}") from exc
    
    if parsed.tzinfo is None:
        logger.debug(f"No offset in {text!r}, assuming UTC")
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_epoch_millis(text: str) -> int:
    """
    Return the milliseconds elapsed since 1970-01-01T00:00:00Z.
    
    Examples:
        >>> to_epoch_millis('01 Jan 1970 00:00:00 UTC')
        0
        >>> to_epoch_millis('04 Dec 1995 00:12:00 UTC')
        818035920000
    """
    return (parse_instant(text) - EPOCH) // timedelta(milliseconds=1)


def from_epoch_millis(millis: int) -> datetime:
    """Convert epoch milliseconds back to a UTC Instant."""
    return EPOCH + timedelta(milliseconds=millis)


def format_clock_time(instant: datetime) -> str:
    """Render the wall-clock time of an instant as HH:MM:SS (24-hour)."""
    return f"{instant.hour:02d}:{instant.minute:02d}:{instant.second:02d}"


def weekday_name(text: str) -> str:
    """Return the English name of the UTC weekday of the given text."""
    return DAY_NAMES[Weekday.of(parse_instant(text))]


def next_friday(instant: Union[date, datetime]) -> Union[date, datetime]:
    """
    Return midnight of the first Friday strictly after the instant's date.
    
    A Friday maps to the Friday a week later, any other day to the
    upcoming Friday (1-6 days ahead). Datetimes keep their tzinfo.
    """
    day = instant.date() if isinstance(instant, datetime) else instant
    ahead = (Weekday.FRIDAY - Weekday.of(day)) % 7 or 7
    try:
        target = day + timedelta(days=ahead)
    except OverflowError as exc:
        raise InvalidArgument(f"No Friday after {day} within the supported calendar") from exc
    
    if isinstance(instant, datetime):
        return datetime.combine(target, time(0), tzinfo=instant.tzinfo)
    return target


def inclusive_day_span(start_text: str, end_text: str) -> float:
    """
    Count calendar days from start to end, including both endpoints.
    
    Inputs are expected to be midnight-aligned; otherwise the fractional
    result is returned unrounded.
    
    Examples:
        >>> inclusive_day_span('2024-02-01T00:00:00.000Z', '2024-02-12T00:00:00.000Z')
        12.0
    """
    start = to_epoch_millis(start_text)
    end = to_epoch_millis(end_text)
    span = 1 + (end - start) / MS_PER_DAY
    if span < 0:
        raise InvalidArgument(f"End {end_text!r} precedes start {start_text!r} by more than a day")

    return span


def is_within_period(date_text: str, period: PeriodLike) -> bool:
    """True if the date lies between period.start and period.end, inclusive."""
    bounds = DatePeriod.coerce(period)
    moment = parse_instant(date_text)
    return parse_instant(bounds.start) <= moment <= parse_instant(bounds.end)


def format_us(date_text: str) -> str:
    """
    Format a date as 'M/D/YYYY, h:mm:ss AM|PM'.
    
    Every field is read from the UTC instant.
    
    Examples:
        >>> format_us('2024-02-01T15:00:00.000Z')
        '2/1/2024, 3:00:00 PM'
        >>> format_us('1999-01-05T02:20:00.000Z')
        '1/5/1999, 2:20:00 AM'
    """
    moment = parse_instant(date_text)
    hour = moment.hour % 12 or 12
    suffix = "PM" if moment.hour >= 12 else "AM"
    
    return (
        f"{moment.month}/{moment.day}/{moment.year}, "
        f"{hour}:{moment.minute:02d}:{moment.second:02d} {suffix}"
    )
