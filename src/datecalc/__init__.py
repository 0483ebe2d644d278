"""
datecalc - Calendar arithmetic utilities.

A small library of pure date functions:
- Timestamp parsing and epoch-millisecond conversion
- Clock-time and US-style formatting
- Weekend counting and ISO-8601 week numbers
- Next Friday / next Friday the 13th searches
- Repeating work/off schedule generation

Example:
    >>> from datecalc import generate_work_schedule
    >>> generate_work_schedule({"start": "01-01-2024", "end": "10-01-2024"}, 1, 1)
    ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']
"""

__version__ = "0.1.0"

# Errors
from datecalc.core.errors import (
    DatecalcError,
    ParseError,
    InvalidArgument,
)

# Input models
from datecalc.products.schema import (
    DatePeriod,
    WorkScheduleSpec,
)

# Instants
from datecalc.core.instants import (
    parse_instant,
    to_epoch_millis,
    from_epoch_millis,
    format_clock_time,
    weekday_name,
    next_friday,
    inclusive_day_span,
    is_within_period,
    format_us,
)

# Calendar arithmetic
from datecalc.core.calendar import (
    Weekday,
    DAY_NAMES,
    is_leap_year,
    days_in_month,
    count_weekend_days,
    iso_week_number,
    iso_year_week,
    next_friday_the_13th,
    quarter_of,
)

# Schedules
from datecalc.core.schedule import (
    generate_work_schedule,
    parse_schedule_date,
    format_schedule_date,
)

__all__ = [
    # Version
    "__version__",
    # Errors
    "DatecalcError",
    "ParseError",
    "InvalidArgument",
    # Models
    "DatePeriod",
    "WorkScheduleSpec",
    # Instants
    "parse_instant",
    "to_epoch_millis",
    "from_epoch_millis",
    "format_clock_time",
    "weekday_name",
    "next_friday",
    "inclusive_day_span",
    "is_within_period",
    "format_us",
    # Calendar
    "Weekday",
    "DAY_NAMES",
    "is_leap_year",
    "days_in_month",
    "count_weekend_days",
    "iso_week_number",
    "iso_year_week",
    "next_friday_the_13th",
    "quarter_of",
    # Schedules
    "generate_work_schedule",
    "parse_schedule_date",
    "format_schedule_date",
]
