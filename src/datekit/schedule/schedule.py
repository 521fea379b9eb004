import logging
from datetime import timedelta
from typing import List, Union

import numpy as np

from .._exceptions import CalendarError
from .._parsing import format_day_month_year, parse_day_month_year
from ..periods.periods import PeriodLike, as_period

logger = logging.getLogger(__name__)

ArrayLike = Union[int, "np.ndarray"]


class WorkCycle:
    """
    Repeating work/off pattern anchored at day 0: `work_days` consecutive
    work days followed by `off_days` consecutive days off.
    """

    def __init__(self, work_days: int, off_days: int) -> None:
        if work_days < 0 or off_days < 0:
            raise CalendarError(
                f"Cycle day counts must be non-negative; got {work_days}, {off_days}."
            )
        self._work_days: int = int(work_days)
        self._off_days: int = int(off_days)
        self._n: int = self._work_days + self._off_days

    # ── day masks ────────────────────────────────────────────────────────

    def _mask(self, days: np.ndarray) -> np.ndarray:
        # Position within the cycle; the first `work_days` positions are work.
        if self._work_days == 0:
            return np.zeros(days.shape, dtype=bool)
        return (days % self._n) < self._work_days

    def work_mask(self, n_days: int) -> np.ndarray:
        """Boolean mask over days ``0 .. n_days - 1``; True on work days."""
        n_days = max(int(n_days), 0)
        return self._mask(np.arange(n_days, dtype=np.int64))

    def work_offsets(self, n_days: int) -> np.ndarray:
        return np.flatnonzero(self.work_mask(n_days))

    def is_work_day(self, day: ArrayLike) -> Union[bool, np.ndarray]:
        scalar = np.ndim(day) == 0
        d = np.atleast_1d(np.asarray(day, dtype=np.int64))
        if np.any(d < 0):
            raise CalendarError("Day offsets must be >= 0.")
        result = self._mask(d)
        return bool(result.flat[0]) if scalar else result

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def work_days(self) -> int:
        return self._work_days

    @property
    def off_days(self) -> int:
        return self._off_days

    @property
    def length(self) -> int:
        return self._n

    def __repr__(self) -> str:
        return f"WorkCycle(work_days={self._work_days}, off_days={self._off_days})"


def get_work_schedule(
    period: PeriodLike,
    count_work_days: int,
    count_off_days: int,
) -> List[str]:
    """
    Work days of a repeating work/off cycle within an inclusive period.

    `period` holds ``DD-MM-YYYY`` strings; its start is always a work day.

    { start: '01-01-2024', end: '10-01-2024' }, 1, 1
        -> ['01-01-2024', '03-01-2024', '05-01-2024', '07-01-2024', '09-01-2024']
    """
    p = as_period(period)
    start = parse_day_month_year(p.start)
    end = parse_day_month_year(p.end)
    cycle = WorkCycle(count_work_days, count_off_days)

    offsets = cycle.work_offsets((end - start).days + 1)
    logger.debug(
        "%r over %s..%s: %d work day(s)", cycle, p.start, p.end, len(offsets)
    )
    return [format_day_month_year(start + timedelta(days=int(i))) for i in offsets]
