"""Input models: periods and work schedules."""

from datecalc.products.schema import DatePeriod, WorkScheduleSpec

__all__ = [
    "DatePeriod",
    "WorkScheduleSpec",
]
