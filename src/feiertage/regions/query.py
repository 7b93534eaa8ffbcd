from __future__ import annotations

import logging
from datetime import date, datetime
from operator import attrgetter
from typing import NamedTuple, Optional

from feiertage.holidays import Holiday
from .table import Region, holidays_in_year

logger = logging.getLogger(__name__)


class HolidayDate(NamedTuple):
    date: date
    holiday: Holiday


def _as_date(day: date) -> date:
    if isinstance(day, datetime):
        return day.date()
    return day


def holiday_dates_in_year(region: Region, year: int) -> list[HolidayDate]:
    """
    Public holidays of ``region`` in ``year`` with their dates, sorted by date.

    Holidays whose date cannot be computed are left out.  The sort is stable,
    so holidays sharing a date keep their ``holidays_in_year`` order.
    """
    resolved: list[HolidayDate] = []
    for holiday in holidays_in_year(region, year):
        day = holiday.date(year)
        if day is None:
            logger.debug("No date for %r in %d, skipped for %r", holiday, year, region)
            continue
        resolved.append(HolidayDate(day, holiday))
    return sorted(resolved, key=attrgetter("date"))


def holidays_on_date(region: Region, day: date) -> tuple[Holiday, ...]:
    """Every public holiday of ``region`` falling on ``day``."""
    day = _as_date(day)
    return tuple(
        holiday
        for holiday in holidays_in_year(region, day.year)
        if holiday.date(day.year) == day
    )


def holiday_from_date(region: Region, day: date) -> Optional[Holiday]:
    """
    The public holiday of ``region`` on ``day``, or ``None``.

    If two holidays coincide (Ascension Day on May 1, e.g. 2008) the one
    listed first by ``holidays_in_year`` wins.  Always ``None`` before 1995.
    """
    day = _as_date(day)
    for holiday in holidays_in_year(region, day.year):
        if holiday.date(day.year) == day:
            return holiday
    return None


def is_holiday(region: Region, day: date) -> bool:
    return holiday_from_date(region, day) is not None
