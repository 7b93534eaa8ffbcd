from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from datetime import date
from typing import Optional, Sequence, Union

import numpy as np

from feiertage.regions import FIRST_YEAR, Region, holiday_dates_in_year
from ._exceptions import WorkCalendarError

logger = logging.getLogger(__name__)

DateArrayLike = Union[date, str, "np.ndarray"]
IntArrayLike = Union[int, "np.ndarray"]

MONDAY_TO_FRIDAY: tuple[int, ...] = (1, 1, 1, 1, 1, 0, 0)


def _parse_weekmask(weekmask: Union[str, Sequence[int]]) -> tuple[int, ...]:
    items = [c for c in weekmask if not c.isspace()] if isinstance(weekmask, str) else list(weekmask)
    if len(items) != 7:
        raise WorkCalendarError(f"Weekmask needs 7 entries (Monday first); got {len(items)}.")
    try:
        mask = tuple(int(x) for x in items)
    except (TypeError, ValueError):
        raise WorkCalendarError(f"Weekmask entries must be 0 or 1; got {weekmask!r}.") from None
    if any(x not in (0, 1) for x in mask):
        raise WorkCalendarError(f"Weekmask entries must be 0 or 1; got {weekmask!r}.")
    if not any(mask):
        raise WorkCalendarError("Weekmask has no working day; nothing can be counted.")
    return mask


def _as_dates(value: DateArrayLike) -> np.ndarray:
    return np.asarray(value, dtype="datetime64[D]")


@dataclass(frozen=True)
class _HolidayTable:
    horizon: int
    holidays: np.ndarray
    calendar: np.busdaycalendar


class WorkCalendar:
    """
    Working days of one region: a weekly pattern (Monday first) minus the
    region's public holidays.

    Backed by ``numpy.busdaycalendar``.  Holidays are tabulated from 1995 up
    to ``horizon`` (a year); queries reaching past it extend the table.
    Without an explicit ``horizon`` the table runs to ten years past the
    current year, so ``horizon`` and ``holidays`` depend on today's date.

    The table is published as one immutable snapshot and only ever grows,
    so a calendar may be shared between threads.
    """

    _DEFAULT_BUFFER: int = 10

    def __init__(
        self,
        region: Region,
        weekmask: Union[str, Sequence[int]] = MONDAY_TO_FRIDAY,
        horizon: Optional[int] = None,
    ) -> None:
        self._region: Region = region
        self._weekmask: tuple[int, ...] = _parse_weekmask(weekmask)
        if horizon is None:
            horizon = date.today().year + self._DEFAULT_BUFFER
        self._lock = threading.Lock()
        self._table: _HolidayTable = self._build(max(int(horizon), FIRST_YEAR))

    # ── holiday table ────────────────────────────────────────────────────

    def _build(self, horizon: int) -> _HolidayTable:
        days = [
            entry.date
            for year in range(FIRST_YEAR, horizon + 1)
            for entry in holiday_dates_in_year(self._region, year)
        ]
        holidays = np.array(days, dtype="datetime64[D]")
        holidays.setflags(write=False)
        calendar = np.busdaycalendar(weekmask=list(self._weekmask), holidays=holidays)
        return _HolidayTable(horizon, holidays, calendar)

    def _extend_to(self, new_horizon: int) -> _HolidayTable:
        with self._lock:
            table = self._table
            if new_horizon <= table.horizon:
                return table
            logger.debug(
                "Extending %r work calendar from %d to %d",
                self._region, table.horizon, new_horizon,
            )
            table = self._build(new_horizon)
            self._table = table
            return table

    def _ensure_horizon(self, dates: np.ndarray, slack_days: int = 0) -> _HolidayTable:
        table = self._table
        known = dates[~np.isnat(dates)]
        if not known.size:
            return table
        last = int(known.max().astype("datetime64[Y]").astype(np.int64)) + 1970
        if slack_days:
            # Calendar days needed to cover `slack_days` working days.
            per_week = sum(self._weekmask)
            last += int(np.ceil(slack_days * 7 / per_week / 365.25)) + 1
        if last > table.horizon:
            return self._extend_to(last + self._DEFAULT_BUFFER)
        return table

    # ── queries ──────────────────────────────────────────────────────────

    def is_workday(self, dates: DateArrayLike) -> Union[bool, np.ndarray]:
        d = _as_dates(dates)
        table = self._ensure_horizon(d.ravel())
        result = np.is_busday(d, busdaycal=table.calendar)
        return bool(result) if d.ndim == 0 else result

    def is_holiday(self, dates: DateArrayLike) -> Union[bool, np.ndarray]:
        """Public holiday, whatever the weekday."""
        d = _as_dates(dates)
        table = self._ensure_horizon(d.ravel())
        result = np.isin(d, table.holidays)
        return bool(result) if d.ndim == 0 else result

    def count(self, start: DateArrayLike, end: DateArrayLike) -> Union[int, np.ndarray]:
        """Working days in ``[start, end)``; negative if ``end`` precedes ``start``."""
        s = _as_dates(start)
        e = _as_dates(end)
        table = self._ensure_horizon(np.concatenate([s.ravel(), e.ravel()]))
        result = np.busday_count(s, e, busdaycal=table.calendar)
        return int(result) if s.ndim == 0 and e.ndim == 0 else result

    def offset(
        self,
        start: DateArrayLike,
        days: IntArrayLike,
        roll: str = "forward",
    ) -> Union[date, np.ndarray]:
        """
        Shift ``start`` by ``days`` working days.

        A ``start`` that is not a working day is first rolled according to
        ``roll`` (see ``numpy.busday_offset``).
        """
        s = _as_dates(start)
        n = np.asarray(days, dtype=np.int64)
        slack = int(np.abs(n).max()) if n.size else 0
        table = self._ensure_horizon(s.ravel(), slack)
        result = np.busday_offset(s, n, roll=roll, busdaycal=table.calendar)
        return result.item() if np.ndim(result) == 0 else result

    # ── properties / repr ────────────────────────────────────────────────

    @property
    def region(self) -> Region:
        return self._region

    @property
    def weekmask(self) -> tuple[int, ...]:
        return self._weekmask

    @property
    def horizon(self) -> int:
        return self._table.horizon

    @property
    def holidays(self) -> np.ndarray:
        return self._table.holidays.copy()

    def __repr__(self) -> str:
        table = self._table
        return (
            f"WorkCalendar(region={self._region!r}, "
            f"weekmask={''.join(map(str, self._weekmask))!r}, "
            f"horizon={table.horizon}, "
            f"holidays={len(table.holidays)})"
        )
