"""
datekit
~~~~~~~

Small, independent date-calculation helpers.  Every function is pure: it
takes values and returns a new value, nothing is mutated or shared.

Basic usage::

    from datetime import date
    import datekit

    datekit.date_to_timestamp("01 Jan 1970 00:00:00 UTC")    # → 0
    datekit.get_day_name("2024-01-30T00:00:00.000Z")         # → 'Tuesday'
    datekit.get_next_friday_the_13th(date(2023, 2, 1))       # → date(2023, 10, 13)

Public API
----------
date_to_timestamp, get_time, get_day_name, format_date     (datekit.timestamps)
get_next_friday, get_count_days_in_month,
get_count_weekends_in_month, get_week_number_by_date,
get_next_friday_the_13th, get_quarter, is_leap_year         (datekit.calendar)
get_count_days_on_period, is_date_in_period, DatePeriod     (datekit.periods)
get_work_schedule, WorkCycle                                (datekit.schedule)
CalendarError      Base exception for all datekit errors.
InvalidDateFormat  A date string could not be parsed.
"""

from __future__ import annotations

import logging

from datekit._exceptions import CalendarError, InvalidDateFormat
from datekit.calendar import (
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_week_number_by_date,
    is_leap_year,
)
from datekit.periods import DatePeriod, get_count_days_on_period, is_date_in_period
from datekit.schedule import WorkCycle, get_work_schedule
from datekit.timestamps import date_to_timestamp, format_date, get_day_name, get_time

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CalendarError",
    "DatePeriod",
    "InvalidDateFormat",
    "WorkCycle",
    "date_to_timestamp",
    "format_date",
    "get_count_days_in_month",
    "get_count_days_on_period",
    "get_count_weekends_in_month",
    "get_day_name",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_time",
    "get_week_number_by_date",
    "get_work_schedule",
    "is_date_in_period",
    "is_leap_year",
]
