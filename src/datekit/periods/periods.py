from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta, timezone, tzinfo
from typing import Mapping, Union

from .._exceptions import CalendarError
from .._parsing import parse_instant

_DAY = timedelta(days=1)


@dataclass(frozen=True, slots=True)
class DatePeriod:
    """Inclusive ``[start, end]`` pair of date strings."""

    start: str
    end: str

    @classmethod
    def from_mapping(cls, period: Mapping[str, str]) -> "DatePeriod":
        try:
            return cls(start=period["start"], end=period["end"])
        except KeyError as exc:
            raise CalendarError(f"Period is missing the {exc.args[0]!r} key.") from exc


PeriodLike = Union[DatePeriod, Mapping[str, str]]


def as_period(period: PeriodLike) -> DatePeriod:
    if isinstance(period, DatePeriod):
        return period
    return DatePeriod.from_mapping(period)


def get_count_days_on_period(
    start: str,
    end: str,
    *,
    default_tz: tzinfo = timezone.utc,
) -> Union[int, float]:
    """
    Days between two ISO-8601 instants, counting both ends.

    Whole-day differences give an ``int``; a time-of-day mismatch between
    the two ends leaves a fractional ``float``.
    """
    delta = parse_instant(end, default_tz=default_tz) - parse_instant(
        start, default_tz=default_tz
    )
    days, remainder = divmod(delta, _DAY)
    if remainder:
        return 1 + delta / _DAY
    return 1 + days


def is_date_in_period(
    value: str,
    period: PeriodLike,
    *,
    default_tz: tzinfo = timezone.utc,
) -> bool:
    p = as_period(period)
    instant = parse_instant(value, default_tz=default_tz)
    return (
        parse_instant(p.start, default_tz=default_tz)
        <= instant
        <= parse_instant(p.end, default_tz=default_tz)
    )
