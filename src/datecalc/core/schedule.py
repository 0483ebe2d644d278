"""
Work schedule generation.

Expands a repeating work/off duty cycle over a period of DD-MM-YYYY dates.
"""

import logging
from datetime import date, datetime, timedelta
from typing import List, Mapping, Union

from datecalc.core.errors import InvalidArgument, ParseError
from datecalc.products.schema import DatePeriod

logger = logging.getLogger(__name__)


SCHEDULE_DATE_FORMAT = "%d-%m-%Y"


def parse_schedule_date(text: str) -> date:
    """Parse a DD-MM-YYYY date."""
    try:
        return datetime.strptime(text, SCHEDULE_DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ParseError(f"Expected DD-MM-YYYY date, got {text!r}") from exc


def format_schedule_date(d: date) -> str:
    """Format a date as DD-MM-YYYY, with a four-digit year."""
    return f"{d.day:02d}-{d.month:02d}-{d.year:04d}"


def _check_count(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{name} must be an integer, got {value!r}")
    if value < 1:
        raise InvalidArgument(f"{name} must be >= 1, got {value}")


def generate_work_schedule(
    period: Union[DatePeriod, Mapping[str, str]],
    count_work_days: int,
    count_off_days: int
) -> List[str]:
    """
    Generate the working dates of a repeating work/off cycle.
    
    Starting on period.start, count_work_days consecutive dates are
    emitted, then count_off_days dates are skipped, and the cycle repeats
    until the running date passes period.end.
    
    Args:
        period: Start and end dates in DD-MM-YYYY format, both inclusive
        count_work_days: Number of consecutive working days (>= 1)
        count_off_days: Number of consecutive days off (>= 1)
        
    Returns:
        Working dates in DD-MM-YYYY format, in order
        
    Examples:
        >>> generate_work_schedule({'start': '01-01-2024', 'end': '15-01-2024'}, 1, 3)
        ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']
    """
    _check_count("count_work_days", count_work_days)
    _check_count("count_off_days", count_off_days)
    
    bounds = DatePeriod.coerce(period)
    start = parse_schedule_date(bounds.start)
    end = parse_schedule_date(bounds.end)
    
    schedule: List[str] = []
    current = start
    worked = 0
    
    while current <= end:
        if worked == count_work_days:
            current += timedelta(days=count_off_days)
            worked = 0
            continue
        schedule.append(format_schedule_date(current))
        worked += 1
        current += timedelta(days=1)
    
    logger.debug(
        f"Generated {len(schedule)} working dates from {bounds.start} to {bounds.end} "
        f"({count_work_days} on / {count_off_days} off)"
    )
    return schedule
