# src/feiertage/regions/__init__.py
"""
feiertage.regions
~~~~~~~~~~~~~~~~~

Public holidays per German region.  Each federal state is a ``Region``;
Bavaria, Saxony and Thuringia are split where their holidays differ
locally.  The holiday set of a region depends on the year, following the
legal changes since 1995.

Basic usage::

    from datetime import date
    from feiertage.regions import Region, holidays_in_year, holiday_from_date

    holidays_in_year(Region.BERLIN, 2019)           # 10 holidays, incl. Frauentag
    holiday_from_date(Region.BERLIN, date(2019, 3, 8))
    # → Holiday.WOMENS_DAY

Sorted dates for a year::

    from feiertage.regions import holiday_dates_in_year

    for day, holiday in holiday_dates_in_year(Region.SACHSEN, 2024):
        print(day, holiday.description)

Public API
----------
Region                    Enumeration of regions.
HolidayDate               ``(date, holiday)`` pair.
nationwide_holidays       Holidays shared by every region.
region_specific_holidays  Additional holidays of one region in a year.
holidays_in_year          All public holidays of a region in a year.
holiday_dates_in_year     The same, with dates, sorted by date.
holidays_on_date          All public holidays of a region on a date.
holiday_from_date         The public holiday on a date, or ``None``.
is_holiday                Whether a date is a public holiday.
RegionError               Raised for unknown federal state codes.
"""

from __future__ import annotations

from feiertage.regions._exceptions import RegionError
from feiertage.regions.query import (
    HolidayDate,
    holiday_dates_in_year,
    holiday_from_date,
    holidays_on_date,
    is_holiday,
)
from feiertage.regions.table import (
    FIRST_YEAR,
    Region,
    Schedule,
    holidays_in_year,
    nationwide_holidays,
    region_specific_holidays,
)

__all__ = [
    "FIRST_YEAR",
    "HolidayDate",
    "Region",
    "RegionError",
    "Schedule",
    "holiday_dates_in_year",
    "holiday_from_date",
    "holidays_in_year",
    "holidays_on_date",
    "is_holiday",
    "nationwide_holidays",
    "region_specific_holidays",
]
