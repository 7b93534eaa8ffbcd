# src/feiertage/holidays/__init__.py
"""
feiertage.holidays
~~~~~~~~~~~~~~~~~~

Catalog of every recurring German holiday: a date rule per holiday and its
German name.  The catalog knows *when* a holiday falls, not *where* it is a
public holiday; that lives in ``feiertage.regions``.

Basic usage::

    from feiertage.holidays import Holiday, date_of, name_of

    date_of(Holiday.CORPUS_CHRISTI, 2024)   # → date(2024, 5, 30)
    name_of(Holiday.DAY_OF_REPENTANCE)      # → "Buß- und Bettag"
    Holiday.GOOD_FRIDAY.date(2024)          # → date(2024, 3, 29)

Public API
----------
Holiday          Enumeration of all holidays.
date_of          Date of a holiday in a year, or ``None``.
name_of          German display name of a holiday.
FixedDate, EasterOffset, DayOfRepentance
                 The date rules behind the catalog.
"""

from __future__ import annotations

from feiertage.holidays.holidays import (
    CATALOG,
    DayOfRepentance,
    EasterOffset,
    FixedDate,
    Holiday,
    HolidaySpec,
    date_of,
    name_of,
)

__all__ = [
    "CATALOG",
    "DayOfRepentance",
    "EasterOffset",
    "FixedDate",
    "Holiday",
    "HolidaySpec",
    "date_of",
    "name_of",
]
