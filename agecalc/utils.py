from __future__ import annotations
import re
from datetime import date
from typing import Any

from .dates import days_in_month
from .models import AgeResult, CalendarDate

_INT_TEXT = re.compile(r"[+-]?\d+")

def calculate_age(birth_date: CalendarDate, reference_date: CalendarDate) -> AgeResult:
    """Years, months and days elapsed from `birth_date` to `reference_date`.

    Expects `birth_date <= reference_date`; the validator guarantees that and
    it is not checked again here.

    A negative day count borrows the length of the month before
    `reference_date`. When that month is shorter than the birth day the
    borrow can still fall short (31 January to 1 March gives -2), so the day
    count is clamped to 0 to keep `days >= 0`.
    """
    years = reference_date.year - birth_date.year
    months = reference_date.month - birth_date.month
    days = reference_date.day - birth_date.day

    if days < 0:
        months -= 1
        if reference_date.month == 1:
            prev_month, prev_year = 12, reference_date.year - 1
        else:
            prev_month, prev_year = reference_date.month - 1, reference_date.year
        days += days_in_month(prev_month, prev_year)
        days = max(days, 0)

    if months < 0:
        years -= 1
        months += 12

    return AgeResult(years=years, months=months, days=days)

def format_age(age: AgeResult) -> str:
    return f"{age.years} years, {age.months} months, {age.days} days"

def parse_int_field(value: Any) -> int | None:
    """Read a form or JSON value as an integer; anything unreadable becomes None.

    Only ints and digit strings are accepted. Booleans, floats and other JSON
    types are not numbers typed by a person.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _INT_TEXT.fullmatch(text):
        return None
    try:
        return int(text)
    except ValueError:
        # more digits than int() will convert
        return None

def reference_date_today() -> CalendarDate:
    return CalendarDate.from_date(date.today())
