"""
datekit.calendar
~~~~~~~~~~~~~~~~

Calendar arithmetic on dates, months and years: weekday stepping, month
lengths, weekend counts, week numbers, quarters and leap years.

Basic usage::

    from datetime import date
    from datekit.calendar import get_next_friday, get_count_weekends_in_month

    get_next_friday(date(2024, 2, 16))          # → date(2024, 2, 23)
    get_count_weekends_in_month(12, 2023)       # → 10

NumPy arrays are accepted for the month/year arithmetic::

    import numpy as np
    months = np.arange(1, 13)
    get_count_days_in_month(months, 2024)       # → array([31, 29, 31, ...])

Public API
----------
get_next_friday              Next Friday strictly after a date.
get_count_days_in_month      Days in a month (28-31).
get_count_weekends_in_month  Saturdays plus Sundays in a month.
get_week_number_by_date      1-based week of the year.
get_next_friday_the_13th     Next 13th of a month that is a Friday.
get_quarter                  Quarter of the year (1-4).
is_leap_year                 Gregorian leap-year test.
CalendarError                Base exception for all calendar-related errors.
"""

from __future__ import annotations

from datekit._exceptions import CalendarError
from datekit.calendar.calendar import (
    get_count_days_in_month,
    get_count_weekends_in_month,
    get_next_friday,
    get_next_friday_the_13th,
    get_quarter,
    get_week_number_by_date,
    is_leap_year,
)

__all__ = [
    "CalendarError",
    "get_count_days_in_month",
    "get_count_weekends_in_month",
    "get_next_friday",
    "get_next_friday_the_13th",
    "get_quarter",
    "get_week_number_by_date",
    "is_leap_year",
]
