# src/feiertage/workdays/__init__.py
"""
feiertage.workdays
~~~~~~~~~~~~~~~~~~

Working-day arithmetic for a German region.  A WorkCalendar combines a weekly
working pattern with the region's public holidays, so counts and offsets skip
weekends and holidays alike.

Basic usage::

    from datetime import date
    from feiertage.regions import Region
    from feiertage.workdays import WorkCalendar

    cal = WorkCalendar(Region.BAYERN_KATH)              # Mon–Fri
    cal.is_workday(date(2024, 8, 15))                   # → False, Mariä Himmelfahrt
    cal.count(date(2024, 12, 23), date(2025, 1, 2))     # → 5
    cal.offset(date(2024, 12, 23), 3)                   # → date(2024, 12, 30)

NumPy arrays are accepted everywhere a scalar is::

    import numpy as np
    days = np.array(["2024-05-30", "2024-05-31"], dtype="datetime64[D]")
    cal.is_workday(days)                                # → array([False,  True])

Public API
----------
WorkCalendar       The main class.
WorkCalendarError  Base exception for all work-calendar errors.
"""

from __future__ import annotations

from feiertage.workdays._exceptions import WorkCalendarError
from feiertage.workdays.workdays import MONDAY_TO_FRIDAY, WorkCalendar

__all__ = [
    "MONDAY_TO_FRIDAY",
    "WorkCalendar",
    "WorkCalendarError",
]
