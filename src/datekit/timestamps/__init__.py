"""
datekit.timestamps
~~~~~~~~~~~~~~~~~~

Conversions between date strings, epoch milliseconds and display strings.

Basic usage::

    from datekit.timestamps import date_to_timestamp, format_date

    date_to_timestamp("04 Dec 1995 00:12:00 UTC")   # → 818035920000
    format_date("2010-12-15T22:59:00.000Z")        # → '12/15/2010, 10:59:00 PM'

Strings without an explicit offset are read in ``default_tz`` (UTC unless
given).  Unparseable strings raise InvalidDateFormat.

Public API
----------
date_to_timestamp  Date string → milliseconds since the epoch.
get_time           datetime → 'hh:mm:ss'.
get_day_name       Date string → 'Sunday' .. 'Saturday'.
format_date        Date string → 'M/D/YYYY, h:mm:ss AM|PM' (UTC).
DAY_NAMES          Weekday names indexed 0=Sunday .. 6=Saturday.
"""

from __future__ import annotations

from datekit.timestamps.timestamps import (
    DAY_NAMES,
    date_to_timestamp,
    format_date,
    get_day_name,
    get_time,
)

__all__ = [
    "DAY_NAMES",
    "date_to_timestamp",
    "format_date",
    "get_day_name",
    "get_time",
]
