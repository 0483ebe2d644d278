"""
Calendar arithmetic on the proleptic Gregorian calendar.

Month lengths, leap years, weekend counting, ISO week numbering,
quarters and the Friday-the-13th search.
"""

import calendar
from datetime import MAXYEAR, MINYEAR, date, datetime, timedelta
from enum import IntEnum
from typing import Tuple, TypeVar

from datecalc.core.errors import InvalidArgument


class Weekday(IntEnum):
    """Day of week, numbered from Sunday."""
    
    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6
    
    @classmethod
    def of(cls, d: date) -> "Weekday":
        """Weekday of a date (or of a datetime's wall-clock date)."""
        return cls(d.isoweekday() % 7)


# Indexed by Weekday
DAY_NAMES: Tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

# ISO weekday numbers (Monday=1 .. Sunday=7)
_ISO_SATURDAY = 6
_ISO_SUNDAY = 7
_ISO_THURSDAY = 4

D = TypeVar("D", bound=date)


def _check_month(month: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidArgument(f"Month must be in 1..12, got {month}")


def _check_year(year: int) -> None:
    if not MINYEAR <= year <= MAXYEAR:
        raise InvalidArgument(f"Year must be in {MINYEAR}..{MAXYEAR}, got {year}")


def is_leap_year(d: date) -> bool:
    """True if the year of the given date is a leap year."""
    return calendar.isleap(d.year)


def days_in_month(month: int, year: int) -> int:
    """
    Return the number of days in a month.
    
    Args:
        month: Month number (1 for January ... 12 for December)
        year: Four-digit year
        
    Examples:
        >>> days_in_month(1, 2024)
        31
        >>> days_in_month(2, 2024)
        29
    """
    _check_month(month)
    _check_year(year)
    return calendar.monthrange(year, month)[1]


def count_weekend_days(month: int, year: int) -> int:
    """
    Count Saturdays and Sundays in a month.
    
    Every full week contributes exactly two weekend days; only the
    leftover days past the last full week are inspected one by one,
    starting from the weekday of the 1st.
    
    Examples:
        >>> count_weekend_days(5, 2022)
        9
        >>> count_weekend_days(12, 2023)
        10
    """
    num_days = days_in_month(month, year)
    first = date(year, month, 1).isoweekday()
    
    full_weeks, remainder = divmod(num_days, 7)
    count = 2 * full_weeks
    
    for offset in range(remainder):
        weekday = (first - 1 + offset) % 7 + 1
        if weekday in (_ISO_SATURDAY, _ISO_SUNDAY):
            count += 1
    
    return count


def iso_year_week(d: date) -> Tuple[int, int]:
    """
    Return the ISO-8601 (year, week) of a date.
    
    Weeks start on Monday and belong to the year holding their Thursday,
    so week 1 is the week containing the year's first Thursday.
    """
    day = d.date() if isinstance(d, datetime) else d
    thursday = day + timedelta(days=_ISO_THURSDAY - day.isoweekday())
    
    day_of_year = (thursday - date(thursday.year, 1, 1)).days
    return thursday.year, day_of_year // 7 + 1


def iso_week_number(d: date) -> int:
    """
    Return the ISO-8601 week number (1..53) of a date.
    
    Examples:
        >>> iso_week_number(date(2024, 1, 3))
        1
        >>> iso_week_number(date(2024, 2, 23))
        8
    """
    return iso_year_week(d)[1]


def _add_months(d: D, months: int) -> D:
    """Add months to a date that falls on or before the 28th."""
    year = d.year + (d.month + months - 1) // 12
    month = (d.month + months - 1) % 12 + 1
    _check_year(year)
    return d.replace(year=year, month=month)


def next_friday_the_13th(d: D) -> D:
    """
    Return the next Friday the 13th on or after the given date's month.
    
    If the day of month is past the 13th the search starts at the 13th of
    the following month, otherwise at the 13th of the current month. A new
    value of the same type is returned; the argument is left untouched.
    
    Examples:
        >>> next_friday_the_13th(date(2024, 1, 13))
        datetime.date(2024, 9, 13)
        >>> next_friday_the_13th(date(2023, 2, 1))
        datetime.date(2023, 10, 13)
    """
    candidate = d.replace(day=13)
    if d.day > 13:
        candidate = _add_months(candidate, 1)
    
    while Weekday.of(candidate) != Weekday.FRIDAY:
        candidate = _add_months(candidate, 1)
    
    return candidate


def quarter_of(d: date) -> int:
    """Return the quarter (1-4) of the year that the date falls in."""
    return (d.month - 1) // 3 + 1
