from __future__ import annotations
from datetime import date
from enum import Enum
from typing import Any, Dict, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .dates import days_in_month

FieldName = Literal["day", "month", "year"]
FIELD_NAMES: tuple[str, ...] = ("day", "month", "year")

# --- Raw input ---
class DateComponents(BaseModel):
    """Unvalidated day/month/year as supplied by a form or API client.

    Fields are left untyped so that any JSON value reaches `parse_int_field`
    and anything that is not a number is reported as a range error instead
    of being coerced or rejected by request parsing.
    """
    day: Any = None
    month: Any = None
    year: Any = None

# --- Dates ---
class CalendarDate(BaseModel):
    """A real day on the proleptic Gregorian calendar."""
    model_config = ConfigDict(frozen=True)

    year: int
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1)

    @model_validator(mode="after")
    def _check_day_exists(self) -> "CalendarDate":
        limit = days_in_month(self.month, self.year)
        if self.day > limit:
            raise ValueError(f"{self.year:04d}-{self.month:02d} has only {limit} days")
        return self

    @classmethod
    def from_date(cls, value: date) -> "CalendarDate":
        return cls(year=value.year, month=value.month, day=value.day)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def is_after(self, other: CalendarDate) -> bool:
        return self.as_tuple() > other.as_tuple()

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

# --- Validation ---
class ErrorKind(str, Enum):
    RANGE = "range"
    CALENDAR = "calendar"
    FUTURE = "future"

class FieldError(BaseModel):
    model_config = ConfigDict(frozen=True)

    field: FieldName
    kind: ErrorKind
    message: str

class ValidationResult(BaseModel):
    """Either a validated birth date or at least one field error, never both."""
    model_config = ConfigDict(frozen=True)

    birth_date: Optional[CalendarDate] = None
    errors: Dict[str, FieldError] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_exclusive(self) -> "ValidationResult":
        if (self.birth_date is None) == (not self.errors):
            raise ValueError("a validation result carries either a date or errors")
        return self

    @property
    def is_valid(self) -> bool:
        return self.birth_date is not None

    def message_for(self, field: str) -> str:
        err = self.errors.get(field)
        return err.message if err else ""

    def messages(self) -> Dict[str, str]:
        return {name: self.message_for(name) for name in FIELD_NAMES}

# --- Results ---
class AgeResult(BaseModel):
    # No bounds here: calculate_age trusts its caller to pass birth <= reference.
    model_config = ConfigDict(frozen=True)

    years: int
    months: int
    days: int
