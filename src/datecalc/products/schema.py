"""
Pydantic models for period and schedule inputs.
"""

from typing import List, Mapping, Union

from pydantic import BaseModel, Field, field_validator


class DatePeriod(BaseModel):
    """
    A pair of calendar dates, inclusive on both ends.
    
    The endpoints are kept as text; each operation parses them in the
    format it expects (ISO-8601 / RFC-2822 for instants, DD-MM-YYYY for
    work schedules).
    """
    
    start: str = Field(..., description="First day of the period")
    end: str = Field(..., description="Last day of the period")
    
    @classmethod
    def coerce(cls, period: Union["DatePeriod", Mapping[str, str]]) -> "DatePeriod":
        """Accept a DatePeriod or a plain {"start": ..., "end": ...} mapping."""
        if isinstance(period, cls):
            return period
        return cls.model_validate(period)
    
    @field_validator("start", "end")
    @classmethod
    def validate_not_blank(cls, v: str) -> str:
        """Reject blank endpoints."""
        if not v.strip():
            raise ValueError("Period endpoints must not be blank")
        return v.strip()
    
    def contains(self, date_text: str) -> bool:
        """True if the date lies within this period."""
        from datecalc.core.instants import is_within_period
        return is_within_period(date_text, self)
    
    def day_span(self) -> float:
        """Number of calendar days covered, both ends included."""
        from datecalc.core.instants import inclusive_day_span
        return inclusive_day_span(self.start, self.end)
    
    class Config:
        """Pydantic configuration."""
        extra = "forbid"


class WorkScheduleSpec(BaseModel):
    """
    A repeating duty cycle over a period.
    
    Starting on the period's first day: count_work_days working days,
    then count_off_days days off, repeated through the period's last day.
    """
    
    period: DatePeriod
    count_work_days: int = Field(..., ge=1, description="Consecutive working days")
    count_off_days: int = Field(..., ge=1, description="Consecutive days off")
    
    def generate(self) -> List[str]:
        """Working dates in DD-MM-YYYY format."""
        from datecalc.core.schedule import generate_work_schedule
        return generate_work_schedule(self.period, self.count_work_days, self.count_off_days)
    
    class Config:
        """Pydantic configuration."""
        extra = "forbid"
