"""
tests/computus/test_computus.py

Covers:
  - Easter Sunday against published dates
  - Offsets from Easter (negative, positive, out of range)
  - Buß- und Bettag: known dates and the Wednesday-before-Nov-23 invariant
  - Domain limits (None for scalars, NaT for arrays)
  - NumPy array inputs and agreement with the scalar path
"""

from datetime import date, timedelta

import numpy as np
import pytest

from feiertage.computus import (
    GREGORIAN_START,
    MAX_YEAR,
    day_of_repentance,
    easter_sunday,
    offset_from_easter,
)


KNOWN_EASTER = {
    1818: date(1818, 3, 22),
    1943: date(1943, 4, 25),
    1995: date(1995, 4, 16),
    2000: date(2000, 4, 23),
    2008: date(2008, 3, 23),
    2011: date(2011, 4, 24),
    2018: date(2018, 4, 1),
    2019: date(2019, 4, 21),
    2020: date(2020, 4, 12),
    2021: date(2021, 4, 4),
    2022: date(2022, 4, 17),
    2023: date(2023, 4, 9),
    2024: date(2024, 3, 31),
    2025: date(2025, 4, 20),
    2026: date(2026, 4, 5),
    2038: date(2038, 4, 25),
    2285: date(2285, 3, 22),
}


# ── Helpers ───────────────────────────────────────────────────────────────────

def weekday_of(days: np.ndarray) -> np.ndarray:
    """Monday = 0, for a datetime64[D] array."""
    return (days.astype(np.int64) + 3) % 7


# ── Easter Sunday ─────────────────────────────────────────────────────────────

class TestEasterSunday:

    @pytest.mark.parametrize("year, expected", sorted(KNOWN_EASTER.items()))
    def test_known_years(self, year, expected):
        assert easter_sunday(year) == expected

    def test_always_a_sunday(self):
        for year in range(GREGORIAN_START, 3000):
            assert easter_sunday(year).weekday() == 6, year

    def test_always_between_march_22_and_april_25(self):
        for year in range(GREGORIAN_START, 3000):
            e = easter_sunday(year)
            assert date(year, 3, 22) <= e <= date(year, 4, 25), year

    def test_before_gregorian_reform_is_none(self):
        assert easter_sunday(GREGORIAN_START - 1) is None
        assert easter_sunday(1000) is None
        assert easter_sunday(0) is None
        assert easter_sunday(-400) is None

    def test_beyond_date_range_is_none(self):
        assert easter_sunday(MAX_YEAR) is not None
        assert easter_sunday(MAX_YEAR + 1) is None
        assert easter_sunday(10 ** 12) is None

    def test_numpy_integer_scalar(self):
        assert easter_sunday(np.int64(2024)) == date(2024, 3, 31)

    def test_non_integer_year_raises(self):
        with pytest.raises(TypeError):
            easter_sunday(2024.0)


# ── Offsets from Easter ───────────────────────────────────────────────────────

class TestOffsetFromEaster:

    def test_zero_offset_is_easter(self):
        assert offset_from_easter(2024, 0) == date(2024, 3, 31)

    def test_good_friday(self):
        assert offset_from_easter(2024, -2) == date(2024, 3, 29)

    def test_carnival_tuesday_in_leap_year(self):
        assert offset_from_easter(2024, -47) == date(2024, 2, 13)

    def test_ascension_and_corpus_christi(self):
        assert offset_from_easter(2024, 39) == date(2024, 5, 9)
        assert offset_from_easter(2024, 60) == date(2024, 5, 30)

    def test_crosses_year_boundary(self):
        assert offset_from_easter(2024, -100) == date(2024, 3, 31) - timedelta(days=100)
        assert offset_from_easter(2024, -100).year == 2023

    def test_undefined_easter_gives_none(self):
        assert offset_from_easter(1500, 1) is None

    def test_result_beyond_date_range_gives_none(self):
        assert offset_from_easter(MAX_YEAR, 400) is None
        assert offset_from_easter(2024, 10 ** 10) is None


# ── Buß- und Bettag ───────────────────────────────────────────────────────────

class TestDayOfRepentance:

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2018, date(2018, 11, 21)),
            (2019, date(2019, 11, 20)),
            (2020, date(2020, 11, 18)),
            (2021, date(2021, 11, 17)),
            (2022, date(2022, 11, 16)),
            (2023, date(2023, 11, 22)),
            (2024, date(2024, 11, 20)),
        ],
    )
    def test_known_years(self, year, expected):
        assert day_of_repentance(year) == expected

    def test_wednesday_one_to_seven_days_before_nov_23(self):
        for year in range(1, 3000):
            d = day_of_repentance(year)
            assert d.weekday() == 2, year
            distance = (date(year, 11, 23) - d).days
            assert 1 <= distance <= 7, year

    def test_reference_on_wednesday_goes_back_a_week(self):
        # 2022-11-23 is itself a Wednesday
        assert date(2022, 11, 23).weekday() == 2
        assert day_of_repentance(2022) == date(2022, 11, 16)

    def test_defined_before_gregorian_reform(self):
        assert day_of_repentance(1000) is not None

    def test_out_of_date_range_is_none(self):
        assert day_of_repentance(0) is None
        assert day_of_repentance(MAX_YEAR + 1) is None


# ── NumPy array inputs ────────────────────────────────────────────────────────

class TestNumPyInputs:

    def test_easter_array(self):
        result = easter_sunday(np.array([2024, 2025]))
        expected = np.array(["2024-03-31", "2025-04-20"], dtype="datetime64[D]")
        np.testing.assert_array_equal(result, expected)

    def test_easter_array_marks_undefined_years_nat(self):
        result = easter_sunday(np.array([2024, 1000, 12000]))
        assert result.dtype == np.dtype("datetime64[D]")
        np.testing.assert_array_equal(np.isnat(result), [False, True, True])
        assert result[0] == np.datetime64("2024-03-31")

    def test_shape_preserved(self):
        years = np.arange(2000, 2012).reshape(3, 4)
        assert easter_sunday(years).shape == (3, 4)
        assert day_of_repentance(years).shape == (3, 4)

    def test_easter_array_matches_scalar(self):
        years = np.arange(GREGORIAN_START, 3000)
        result = easter_sunday(years)
        expected = np.array([easter_sunday(int(y)) for y in years], dtype="datetime64[D]")
        np.testing.assert_array_equal(result, expected)

    def test_offset_broadcast_days(self):
        result = offset_from_easter(2024, np.array([-2, 0, 1, 39]))
        expected = np.array(
            ["2024-03-29", "2024-03-31", "2024-04-01", "2024-05-09"],
            dtype="datetime64[D]",
        )
        np.testing.assert_array_equal(result, expected)

    def test_offset_broadcast_years(self):
        result = offset_from_easter(np.array([2019, 2024]), 60)
        expected = np.array(["2019-06-20", "2024-05-30"], dtype="datetime64[D]")
        np.testing.assert_array_equal(result, expected)

    def test_offset_array_out_of_range(self):
        result = offset_from_easter(np.array([MAX_YEAR, 1500]), np.array([400, 0]))
        assert np.isnat(result).all()

    def test_repentance_array_matches_scalar(self):
        years = np.arange(1, 3000)
        result = day_of_repentance(years)
        expected = np.array([day_of_repentance(int(y)) for y in years], dtype="datetime64[D]")
        np.testing.assert_array_equal(result, expected)

    def test_repentance_array_is_always_wednesday(self):
        result = day_of_repentance(np.arange(1, 3000))
        assert np.all(weekday_of(result) == 2)

    def test_repentance_array_out_of_range_is_nat(self):
        result = day_of_repentance(np.array([0, 2023, 10000]))
        np.testing.assert_array_equal(np.isnat(result), [True, False, True])
        assert result[1] == np.datetime64("2023-11-22")
