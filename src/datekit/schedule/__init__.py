"""
datekit.schedule
~~~~~~~~~~~~~~~~

Shift schedules built from a repeating cycle of work days and days off.

Basic usage::

    from datekit.schedule import get_work_schedule

    get_work_schedule({"start": "01-01-2024", "end": "15-01-2024"}, 1, 3)
    # → ['01-01-2024', '05-01-2024', '09-01-2024', '13-01-2024']

The cycle itself is available as a WorkCycle, with NumPy day masks::

    cycle = WorkCycle(2, 2)
    cycle.work_mask(6)              # → array([ True,  True, False, False,  True,  True])

Public API
----------
get_work_schedule  Work days of a cycle within a DD-MM-YYYY period.
WorkCycle          The work/off cycle.
"""

from __future__ import annotations

from datekit.schedule.schedule import WorkCycle, get_work_schedule

__all__ = [
    "WorkCycle",
    "get_work_schedule",
]
