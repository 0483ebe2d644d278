"""Core utilities: instants, calendar arithmetic, and work schedules."""

from datecalc.core.errors import DatecalcError, ParseError, InvalidArgument
from datecalc.core.calendar import (
    DAY_NAMES,
    Weekday,
    count_weekend_days,
    days_in_month,
    is_leap_year,
    iso_week_number,
    iso_year_week,
    next_friday_the_13th,
    quarter_of,
)
from datecalc.core.instants import (
    MS_PER_DAY,
    format_clock_time,
    format_us,
    from_epoch_millis,
    inclusive_day_span,
    is_within_period,
    next_friday,
    parse_instant,
    to_epoch_millis,
    weekday_name,
)
from datecalc.core.schedule import (
    SCHEDULE_DATE_FORMAT,
    format_schedule_date,
    generate_work_schedule,
    parse_schedule_date,
)

__all__ = [
    "DatecalcError",
    "ParseError",
    "InvalidArgument",
    "DAY_NAMES",
    "Weekday",
    "count_weekend_days",
    "days_in_month",
    "is_leap_year",
    "iso_week_number",
    "iso_year_week",
    "next_friday_the_13th",
    "quarter_of",
    "MS_PER_DAY",
    "format_clock_time",
    "format_us",
    "from_epoch_millis",
    "inclusive_day_span",
    "is_within_period",
    "next_friday",
    "parse_instant",
    "to_epoch_millis",
    "weekday_name",
    "SCHEDULE_DATE_FORMAT",
    "format_schedule_date",
    "generate_work_schedule",
    "parse_schedule_date",
]
