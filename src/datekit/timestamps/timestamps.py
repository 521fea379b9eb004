from __future__ import annotations

from datetime import datetime, timedelta, timezone, tzinfo

from .._parsing import parse_instant

DAY_NAMES: tuple[str, ...] = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MILLISECOND = timedelta(milliseconds=1)


def date_to_timestamp(value: str, *, default_tz: tzinfo = timezone.utc) -> int:
    """
    Milliseconds elapsed since 1970-01-01T00:00:00Z for a date string.

    '01 Jan 1970 00:00:00 UTC' -> 0
    '04 Dec 1995 00:12:00 UTC' -> 818035920000
    """
    return (parse_instant(value, default_tz=default_tz) - _EPOCH) // _MILLISECOND


def get_time(value: datetime) -> str:
    """Wall-clock time of `value` as ``hh:mm:ss`` (24-hour)."""
    return f"{value.hour:02d}:{value.minute:02d}:{value.second:02d}"


def get_day_name(value: str, *, default_tz: tzinfo = timezone.utc) -> str:
    parsed = parse_instant(value, default_tz=default_tz)
    # isoweekday(): Monday=1 .. Sunday=7, DAY_NAMES starts on Sunday.
    return DAY_NAMES[parsed.isoweekday() % 7]


def format_date(
    value: str,
    *,
    default_tz: tzinfo = timezone.utc,
    legacy_hours: bool = False,
) -> str:
    """
    Format a date string as ``M/D/YYYY, h:mm:ss AM|PM`` using UTC fields.

    '2024-02-01T15:00:00.000Z' -> '2/1/2024, 3:00:00 PM'
    '1999-01-05T02:20:00.000Z' -> '1/5/1999, 2:20:00 AM'

    Midnight and noon read as 12. With ``legacy_hours=True`` the hour is
    ``hh % 13`` instead: midnight reads as 0, noon as 12, 13:00 as 0 and 15:00 as 2.
    """
    utc = parse_instant(value, default_tz=default_tz).astimezone(timezone.utc)
    hh = utc.hour
    half_day = "PM" if hh > 11 else "AM"
    hour = hh % 13 if legacy_hours else (hh % 12 or 12)
    return (
        f"{utc.month}/{utc.day}/{utc.year}, "
        f"{hour}:{utc.minute:02d}:{utc.second:02d} {half_day}"
    )
