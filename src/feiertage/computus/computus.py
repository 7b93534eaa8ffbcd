from __future__ import annotations

import operator
from datetime import date, timedelta
from typing import Optional, Union

import numpy as np

ArrayLike = Union[int, "np.ndarray"]
DateLike = Union[Optional[date], "np.ndarray"]

GREGORIAN_START: int = 1583
MIN_YEAR: int = date.min.year
MAX_YEAR: int = date.max.year

_NAT = np.datetime64("NaT", "D")
_EPOCH_WEEKDAY: int = 3     # 1970-01-01 was a Thursday (Monday = 0)
_FALLBACK_YEAR: int = 2000  # stands in for out-of-domain years before masking


# ── shared formulas (int or int64 array) ─────────────────────────────────────

def _easter_month_day(year):
    """Anonymous Gregorian (Meeus/Jones/Butcher) algorithm."""
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return month, day + 1


def _repentance_step_back(weekday):
    # Mon/Tue/Wed reach back into the previous week.
    if np.ndim(weekday) == 0:
        return weekday + 5 if weekday < 3 else weekday - 2
    return np.where(weekday < 3, weekday + 5, weekday - 2)


# ── NumPy helpers ────────────────────────────────────────────────────────────

def _ymd(years: np.ndarray, months, days) -> np.ndarray:
    months_since_epoch = np.asarray((years - 1970) * 12 + (np.asarray(months) - 1))
    first = months_since_epoch.astype("datetime64[M]").astype("datetime64[D]")
    return first + np.asarray(np.asarray(days) - 1).astype("timedelta64[D]")


def _year_of(dates: np.ndarray) -> np.ndarray:
    return dates.astype("datetime64[Y]").astype(np.int64) + 1970


def _in_domain(years: np.ndarray, lowest: int) -> tuple[np.ndarray, np.ndarray]:
    valid = (years >= lowest) & (years <= MAX_YEAR)
    return valid, np.where(valid, years, _FALLBACK_YEAR)


# ── scalar backend ───────────────────────────────────────────────────────────

def _easter_scalar(year: int) -> Optional[date]:
    if not GREGORIAN_START <= year <= MAX_YEAR:
        return None
    month, day = _easter_month_day(year)
    return date(year, month, day)


def _offset_scalar(year: int, days: int) -> Optional[date]:
    sunday = _easter_scalar(year)
    if sunday is None:
        return None
    try:
        return sunday + timedelta(days=days)
    except OverflowError:
        return None


def _repentance_scalar(year: int) -> Optional[date]:
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None
    reference = date(year, 11, 23)
    return reference - timedelta(days=_repentance_step_back(reference.weekday()))


# ── array backend ────────────────────────────────────────────────────────────

def _easter_array(years: np.ndarray) -> np.ndarray:
    valid, safe = _in_domain(years, GREGORIAN_START)
    month, day = _easter_month_day(safe)
    return np.where(valid, _ymd(safe, month, day), _NAT)


def _offset_array(years: np.ndarray, days: np.ndarray) -> np.ndarray:
    years, days = np.broadcast_arrays(years, days)
    shifted = _easter_array(years) + days.astype("timedelta64[D]")
    shifted_year = _year_of(shifted)
    ok = ~np.isnat(shifted) & (shifted_year >= MIN_YEAR) & (shifted_year <= MAX_YEAR)
    return np.where(ok, shifted, _NAT)


def _repentance_array(years: np.ndarray) -> np.ndarray:
    valid, safe = _in_domain(years, MIN_YEAR)
    reference = _ymd(safe, 11, 23)
    weekday = (reference.astype(np.int64) + _EPOCH_WEEKDAY) % 7
    result = reference - _repentance_step_back(weekday).astype("timedelta64[D]")
    return np.where(valid, result, _NAT)


# ── public API ───────────────────────────────────────────────────────────────

def easter_sunday(year: ArrayLike) -> DateLike:
    """
    Gregorian Easter Sunday of ``year``.

    Defined for ``GREGORIAN_START <= year <= MAX_YEAR``; other years give
    ``None`` (scalar input) or ``NaT`` (array input).
    """
    if np.ndim(year) == 0:
        return _easter_scalar(operator.index(year))
    return _easter_array(np.asarray(year, dtype=np.int64))


def offset_from_easter(year: ArrayLike, days: ArrayLike) -> DateLike:
    """
    Easter Sunday of ``year`` shifted by ``days`` (negative = before Easter).

    ``year`` and ``days`` broadcast against each other when either is an
    array.  Undefined when Easter is undefined or the shifted date leaves the
    ``datetime.date`` range.
    """
    if np.ndim(year) == 0 and np.ndim(days) == 0:
        return _offset_scalar(operator.index(year), operator.index(days))
    return _offset_array(
        np.asarray(year, dtype=np.int64), np.asarray(days, dtype=np.int64)
    )


def day_of_repentance(year: ArrayLike) -> DateLike:
    """
    Buß- und Bettag: the Wednesday strictly before November 23.

    Always 1 to 7 days before November 23 of ``year``.
    """
    if np.ndim(year) == 0:
        return _repentance_scalar(operator.index(year))
    return _repentance_array(np.asarray(year, dtype=np.int64))
