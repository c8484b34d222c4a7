"""Week arithmetic for life and year calendars.

All week boundaries are counted in whole calendar days: a week is seven
local dates, regardless of clock time, time zone or daylight saving shifts.
No ISO-8601 week alignment is attempted.
"""

import re
from datetime import date, datetime
from enum import Enum
from typing import NamedTuple

from .constants import (
    DAYS_PER_WEEK,
    DEFAULT_LIFE_EXPECTANCY,
    MAX_LIFE_EXPECTANCY,
    MIN_LIFE_EXPECTANCY,
    WEEKS_PER_YEAR,
)
from .errors import InvalidInput

_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


class WeekCount(NamedTuple):
    """Elapsed and total grid units for one calendar."""
    elapsed_units: int
    total_units: int


class CellState(str, Enum):
    LIVED = "lived"
    CURRENT = "current"
    FUTURE = "future"


def parse_date(value: date | str | None, field: str = "date") -> date:
    """
    Parse a ``YYYY-MM-DD`` string (or pass through a date).

    Raises:
        InvalidInput: If the value is missing, malformed or not a real date
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value:
        raise InvalidInput(f"{field} is required (format: YYYY-MM-DD)")
    if not isinstance(value, str) or not _DATE_PATTERN.match(value):
        raise InvalidInput(f"{field} must be in YYYY-MM-DD format")
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise InvalidInput(f"{field} is not a valid date")


def weeks_between(start: date, end: date) -> int:
    """Whole weeks from ``start`` to ``end`` (floored, negative if reversed)."""
    return (end - start).days // DAYS_PER_WEEK


def life_weeks(
    birth_date: date | str | None,
    reference_date: date | None = None,
    life_expectancy: int = DEFAULT_LIFE_EXPECTANCY,
) -> WeekCount:
    """
    Count weeks lived out of a full life.

    Args:
        birth_date: Birth date, as a date or ``YYYY-MM-DD`` string
        reference_date: The "now" of the calendar; defaults to today
        life_expectancy: Expected lifespan in years, 1-150

    Returns:
        WeekCount with elapsed units clamped to the last grid index

    Raises:
        InvalidInput: Listing every problem with the inputs
    """
    reference = reference_date or date.today()
    reasons: list[str] = []

    birth: date | None = None
    try:
        birth = parse_date(birth_date, "birthDate")
    except InvalidInput as e:
        reasons.extend(e.reasons)

    if (
        isinstance(life_expectancy, bool)
        or not isinstance(life_expectancy, int)
        or not MIN_LIFE_EXPECTANCY <= life_expectancy <= MAX_LIFE_EXPECTANCY
    ):
        reasons.append(
            f"lifeExpectancy must be a number between "
            f"{MIN_LIFE_EXPECTANCY} and {MAX_LIFE_EXPECTANCY}"
        )

    if birth is not None and birth > reference:
        reasons.append("birthDate cannot be in the future")

    if reasons:
        raise InvalidInput(reasons)

    total_units = life_expectancy * WEEKS_PER_YEAR
    elapsed = min(weeks_between(birth, reference), total_units - 1)
    return WeekCount(elapsed_units=elapsed, total_units=total_units)


def year_weeks(reference_date: date | None = None) -> WeekCount:
    """Count completed weeks of the reference date's year, clamped to 0-51."""
    reference = reference_date or date.today()
    start_of_year = date(reference.year, 1, 1)
    elapsed = weeks_between(start_of_year, reference)
    elapsed = max(0, min(elapsed, WEEKS_PER_YEAR - 1))
    return WeekCount(elapsed_units=elapsed, total_units=WEEKS_PER_YEAR)


def classify_cell(index: int, elapsed_units: int) -> CellState:
    if index < elapsed_units:
        return CellState.LIVED
    if index == elapsed_units:
        return CellState.CURRENT
    return CellState.FUTURE


def cell_states(total_units: int, elapsed_units: int) -> list[CellState]:
    """Classify every grid index in order."""
    return [classify_cell(i, elapsed_units) for i in range(total_units)]
