"""
Shared pytest fixtures for datecalc tests.

Provides reusable periods and schedule specifications.
"""

import pytest
from datetime import date

from datecalc.products.schema import DatePeriod, WorkScheduleSpec


@pytest.fixture
def february_period() -> DatePeriod:
    """ISO period covering 2 Feb 2024 to 2 Mar 2024."""
    return DatePeriod(start="2024-02-02", end="2024-03-02")


@pytest.fixture
def january_schedule_period() -> DatePeriod:
    """DD-MM-YYYY period covering the first half of January 2024."""
    return DatePeriod(start="01-01-2024", end="15-01-2024")


@pytest.fixture
def one_on_three_off(january_schedule_period: DatePeriod) -> WorkScheduleSpec:
    """One working day followed by three days off."""
    return WorkScheduleSpec(
        period=january_schedule_period,
        count_work_days=1,
        count_off_days=3,
    )


@pytest.fixture
def friday() -> date:
    """A Friday that is also the 13th."""
    return date(2023, 10, 13)
