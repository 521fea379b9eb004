"""
datekit.periods
~~~~~~~~~~~~~~~

Inclusive date periods over ISO-8601 strings.

Basic usage::

    from datekit.periods import DatePeriod, is_date_in_period

    is_date_in_period("2024-02-10", {"start": "2024-02-02", "end": "2024-03-02"})  # → True
    get_count_days_on_period("2024-02-01T00:00:00.000Z",
                             "2024-02-12T00:00:00.000Z")                            # → 12

Public API
----------
DatePeriod                Frozen ``(start, end)`` pair; plain mappings are accepted too.
get_count_days_on_period  Day count including both ends.
is_date_in_period         Inclusive membership test.
"""

from __future__ import annotations

from datekit.periods.periods import (
    DatePeriod,
    get_count_days_on_period,
    is_date_in_period,
)

__all__ = [
    "DatePeriod",
    "get_count_days_on_period",
    "is_date_in_period",
]
