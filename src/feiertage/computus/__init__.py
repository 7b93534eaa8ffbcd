# src/feiertage/computus/__init__.py
"""
feiertage.computus
~~~~~~~~~~~~~~~~~~

Date arithmetic behind the moveable holidays: Gregorian Easter Sunday, fixed
offsets from it, and the Buß- und Bettag (the Wednesday before November 23).

Basic usage::

    from feiertage.computus import easter_sunday, offset_from_easter

    easter_sunday(2024)              # → date(2024, 3, 31)
    offset_from_easter(2024, 39)     # Ascension → date(2024, 5, 9)
    easter_sunday(1000)              # → None, before the Gregorian reform

NumPy arrays of years are accepted everywhere a scalar is; undefined results
come back as ``NaT``::

    import numpy as np
    easter_sunday(np.array([2024, 2025, 1000]))
    # → array(['2024-03-31', '2025-04-20', 'NaT'], dtype='datetime64[D]')

Public API
----------
easter_sunday        Easter Sunday of a year.
offset_from_easter   Easter Sunday shifted by a signed number of days.
day_of_repentance    Buß- und Bettag of a year.
"""

from __future__ import annotations

from feiertage.computus.computus import (
    GREGORIAN_START,
    MAX_YEAR,
    MIN_YEAR,
    day_of_repentance,
    easter_sunday,
    offset_from_easter,
)

__all__ = [
    "GREGORIAN_START",
    "MAX_YEAR",
    "MIN_YEAR",
    "day_of_repentance",
    "easter_sunday",
    "offset_from_easter",
]
