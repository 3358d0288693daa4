"""Validation of raw day/month/year input against a reference date.

Every field is checked independently so a caller can show all problems at
once. Nothing in here raises on bad input: the outcome is always a
`ValidationResult`.
"""
from __future__ import annotations
import logging
from typing import Dict, Optional

from .config import settings
from .dates import days_in_month
from .models import CalendarDate, ErrorKind, FieldError, ValidationResult

logger = logging.getLogger(__name__)

DAY_RANGE_MESSAGE = "Please enter a valid day between 1 and 31."
MONTH_RANGE_MESSAGE = "Please enter a valid month between 1 and 12."
YEAR_RANGE_MESSAGE = "Please enter a valid year."
INVALID_DATE_MESSAGE = "The date entered is not valid."
FUTURE_DATE_MESSAGE = "Date must be in the past"

def _in_range(value: Optional[int], low: int, high: int) -> bool:
    # bool is an int subclass; a checkbox value is not a date component
    if value is None or isinstance(value, bool) or not isinstance(value, int):
        return False
    return low <= value <= high

def validate(
    day: Optional[int],
    month: Optional[int],
    year: Optional[int],
    reference_date: CalendarDate,
    *,
    min_year: Optional[int] = None,
) -> ValidationResult:
    """Check a birth date typed in as three numbers.

    `None` stands for input that could not be read as a number and fails the
    range check of its field. Calendar consistency is only checked once all
    three values are in range, and the future-date check only once the triple
    names a real day. A birth date equal to `reference_date` is accepted.
    """
    min_year = settings.min_year if min_year is None else min_year
    errors: Dict[str, FieldError] = {}

    if not _in_range(day, 1, 31):
        errors["day"] = FieldError(field="day", kind=ErrorKind.RANGE, message=DAY_RANGE_MESSAGE)
    if not _in_range(month, 1, 12):
        errors["month"] = FieldError(field="month", kind=ErrorKind.RANGE, message=MONTH_RANGE_MESSAGE)
    if not _in_range(year, min_year, reference_date.year):
        errors["year"] = FieldError(field="year", kind=ErrorKind.RANGE, message=YEAR_RANGE_MESSAGE)

    if errors:
        logger.debug("Range check failed for %s", ", ".join(sorted(errors)))
        return ValidationResult(errors=errors)

    if day > days_in_month(month, year):
        logger.debug("Calendar check failed for day")
        return ValidationResult(errors={
            "day": FieldError(field="day", kind=ErrorKind.CALENDAR, message=INVALID_DATE_MESSAGE),
        })

    birth_date = CalendarDate(year=year, month=month, day=day)
    if birth_date.is_after(reference_date):
        logger.debug("Future-date check failed for year")
        return ValidationResult(errors={
            "year": FieldError(field="year", kind=ErrorKind.FUTURE, message=FUTURE_DATE_MESSAGE),
        })

    return ValidationResult(birth_date=birth_date)
