import logging
from datetime import date, datetime, timedelta
from typing import Tuple, Union

import numpy as np
from dateutil.relativedelta import relativedelta

from .._exceptions import CalendarError

logger = logging.getLogger(__name__)

IntLike = Union[int, "np.ndarray"]
BoolLike = Union[bool, "np.ndarray"]
DateLike = Union[date, "np.datetime64", "np.ndarray"]

# date.weekday() ordinals (Monday=0).
_FRIDAY: int = 4
_SATURDAY: int = 5

# 1970-01-01 was a Thursday.
_EPOCH_WEEKDAY: int = 3


# ── month arithmetic (shared, vectorised) ───────────────────────────────────

def _as_int64(value: IntLike, name: str) -> np.ndarray:
    arr = np.atleast_1d(np.asarray(value))
    if not np.issubdtype(arr.dtype, np.integer):
        as_float = arr.astype(np.float64)
        if not np.all(np.isfinite(as_float) & (as_float == np.floor(as_float))):
            raise CalendarError(f"{name} must be a whole number; got {value}.")
    return arr.astype(np.int64)


def _months(month: IntLike, year: IntLike) -> Tuple[np.ndarray, bool]:
    scalar = np.ndim(month) == 0 and np.ndim(year) == 0
    m = _as_int64(month, "Month")
    y = _as_int64(year, "Year")
    if np.any((m < 1) | (m > 12)):
        raise CalendarError(f"Month must be in 1..12; got {month}.")
    m, y = np.broadcast_arrays(m, y)
    return ((y - 1970) * 12 + (m - 1)).astype("datetime64[M]"), scalar


def _month_bounds(months: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """First day (as datetime64[D]) and length in days of each month."""
    first = months.astype("datetime64[D]")
    following = (months + np.timedelta64(1, "M")).astype("datetime64[D]")
    return first, (following - first).astype(np.int64)


def _year_month(value: DateLike) -> Tuple[IntLike, IntLike, bool]:
    if isinstance(value, date):
        return value.year, value.month, True
    arr = np.asarray(value)
    if not np.issubdtype(arr.dtype, np.datetime64):
        arr = arr.astype("datetime64[D]")
    months = arr.astype("datetime64[M]").astype(np.int64)
    return months // 12 + 1970, months % 12 + 1, np.ndim(months) == 0


# ── public functions ─────────────────────────────────────────────────────────

def get_next_friday(value: date) -> date:
    """
    The Friday strictly after `value`, keeping its time of day.

    A Friday maps to the Friday one week later.  A new object is returned;
    `value` is left untouched.
    """
    return value + timedelta(days=(_FRIDAY - value.weekday()) % 7 or 7)


def get_count_days_in_month(month: IntLike, year: IntLike) -> IntLike:
    months, scalar = _months(month, year)
    _, days = _month_bounds(months)
    return int(days.flat[0]) if scalar else days


def get_count_weekends_in_month(month: IntLike, year: IntLike) -> IntLike:
    """
    Number of Saturdays and Sundays in a month.

    Days 1-28 always hold exactly four full weeks, so eight weekend days.
    The remaining 0-3 days start on the same weekday as the 1st; count how
    many of them fall on Saturday (5) or Sunday (6).
    """
    months, scalar = _months(month, year)
    first, days = _month_bounds(months)
    first_weekday = (first.astype(np.int64) + _EPOCH_WEEKDAY) % 7
    tail_end = np.minimum(first_weekday + (days - 28), 7)
    extra = np.clip(tail_end - np.maximum(first_weekday, _SATURDAY), 0, None)
    result = 8 + extra
    return int(result.flat[0]) if scalar else result


def get_week_number_by_date(value: date) -> int:
    """
    Week of the year, 1-based.

    Weeks are counted in blocks of seven days from January 1st.  When
    January 1st is a Friday, Saturday or Sunday the count starts at 2.
    """
    jan_first = date(value.year, 1, 1)
    days = value.toordinal() - jan_first.toordinal()
    week = 1 + days // 7
    if jan_first.weekday() >= _FRIDAY:
        week += 1
    return week


def get_next_friday_the_13th(value: date) -> date:
    """
    The first Friday the 13th on or after `value`.

    A `value` that already is a Friday the 13th is returned as is, time of
    day included.  Any later match is at midnight in the same tzinfo.
    """
    if value.day == 13 and value.weekday() == _FRIDAY:
        return value

    candidate = value.replace(day=13)
    if isinstance(candidate, datetime):
        candidate = candidate.replace(hour=0, minute=0, second=0, microsecond=0)
    if value.day > 13:
        candidate += relativedelta(months=1)

    steps = 0
    while candidate.weekday() != _FRIDAY:
        candidate += relativedelta(months=1)
        steps += 1
    logger.debug("Friday the 13th after %s found %d month(s) on", value, steps)
    return candidate


def get_quarter(value: DateLike) -> IntLike:
    _, month, scalar = _year_month(value)
    quarter = (month - 1) // 3 + 1
    return int(quarter) if scalar else quarter


def is_leap_year(value: DateLike) -> BoolLike:
    year, _, scalar = _year_month(value)
    leap = (year % 4 == 0) & ((year % 100 != 0) | (year % 400 == 0))
    return bool(leap) if scalar else leap
