from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType
from typing import Optional, Protocol

from feiertage.computus import MAX_YEAR, MIN_YEAR, day_of_repentance, offset_from_easter


class DateRule(Protocol):
    def date(self, year: int) -> Optional[date]: ...


@dataclass(frozen=True, slots=True)
class FixedDate:
    month: int
    day: int

    def date(self, year: int) -> Optional[date]:
        if not MIN_YEAR <= year <= MAX_YEAR:
            return None
        try:
            return date(year, self.month, self.day)
        except ValueError:
            return None


@dataclass(frozen=True, slots=True)
class EasterOffset:
    days: int

    def date(self, year: int) -> Optional[date]:
        return offset_from_easter(year, self.days)


@dataclass(frozen=True, slots=True)
class DayOfRepentance:

    def date(self, year: int) -> Optional[date]:
        return day_of_repentance(year)


@dataclass(frozen=True, slots=True)
class HolidaySpec:
    rule: DateRule
    name: str


class Holiday(Enum):
    """
    Every recurring holiday in Germany, public and non-public.

    Which of them are public holidays depends on region and year; see
    ``feiertage.regions.Region``.
    """

    NEW_YEAR = "neujahr"
    EPIPHANY = "heilige_drei_koenige"
    WOMENS_DAY = "frauentag"
    CARNIVAL_TUESDAY = "faschingsdienstag"
    ASH_WEDNESDAY = "aschermittwoch"
    MAUNDY_THURSDAY = "gruendonnerstag"
    GOOD_FRIDAY = "karfreitag"
    EASTER_SUNDAY = "ostersonntag"
    EASTER_MONDAY = "ostermontag"
    LABOUR_DAY = "erster_mai"
    ASCENSION_DAY = "christi_himmelfahrt"
    WHIT_SUNDAY = "pfingstsonntag"
    WHIT_MONDAY = "pfingstmontag"
    CORPUS_CHRISTI = "fronleichnam"
    AUGSBURG_PEACE_FESTIVAL = "augsburger_friedensfest"
    ASSUMPTION_DAY = "mariae_himmelfahrt"
    CHILDRENS_DAY = "weltkindertag"
    GERMAN_UNITY_DAY = "tag_der_deutschen_einheit"
    REFORMATION_DAY = "reformationstag"
    ALL_SAINTS_DAY = "allerheiligen"
    DAY_OF_REPENTANCE = "buss_und_bettag"
    CHRISTMAS_EVE = "heiligabend"
    CHRISTMAS_DAY_1 = "erster_weihnachtsfeiertag"
    CHRISTMAS_DAY_2 = "zweiter_weihnachtsfeiertag"
    NEW_YEARS_EVE = "silvester"

    def date(self, year: int) -> Optional[date]:
        """Date of this holiday in ``year``, ``None`` if it cannot be computed."""
        return CATALOG[self].rule.date(year)

    @property
    def description(self) -> str:
        return CATALOG[self].name

    @property
    def moveable(self) -> bool:
        return not isinstance(CATALOG[self].rule, FixedDate)

    def __repr__(self) -> str:
        return f"Holiday.{self.name}"


CATALOG: MappingProxyType[Holiday, HolidaySpec] = MappingProxyType({
    Holiday.NEW_YEAR: HolidaySpec(FixedDate(1, 1), "Neujahr"),
    Holiday.EPIPHANY: HolidaySpec(FixedDate(1, 6), "Heilige Drei Könige"),
    Holiday.WOMENS_DAY: HolidaySpec(FixedDate(3, 8), "Frauentag"),
    Holiday.CARNIVAL_TUESDAY: HolidaySpec(EasterOffset(-47), "Faschingsdienstag"),
    Holiday.ASH_WEDNESDAY: HolidaySpec(EasterOffset(-46), "Aschermittwoch"),
    Holiday.MAUNDY_THURSDAY: HolidaySpec(EasterOffset(-3), "Gründonnerstag"),
    Holiday.GOOD_FRIDAY: HolidaySpec(EasterOffset(-2), "Karfreitag"),
    Holiday.EASTER_SUNDAY: HolidaySpec(EasterOffset(0), "Ostersonntag"),
    Holiday.EASTER_MONDAY: HolidaySpec(EasterOffset(1), "Ostermontag"),
    Holiday.LABOUR_DAY: HolidaySpec(FixedDate(5, 1), "Erster Mai"),
    Holiday.ASCENSION_DAY: HolidaySpec(EasterOffset(39), "Christi Himmelfahrt"),
    Holiday.WHIT_SUNDAY: HolidaySpec(EasterOffset(49), "Pfingstsonntag"),
    Holiday.WHIT_MONDAY: HolidaySpec(EasterOffset(50), "Pfingstmontag"),
    Holiday.CORPUS_CHRISTI: HolidaySpec(EasterOffset(60), "Fronleichnam"),
    Holiday.AUGSBURG_PEACE_FESTIVAL: HolidaySpec(FixedDate(8, 8), "Augsburger Friedensfest"),
    Holiday.ASSUMPTION_DAY: HolidaySpec(FixedDate(8, 15), "Mariä Himmelfahrt"),
    Holiday.CHILDRENS_DAY: HolidaySpec(FixedDate(9, 20), "Weltkindertag"),
    Holiday.GERMAN_UNITY_DAY: HolidaySpec(FixedDate(10, 3), "Tag der Deutschen Einheit"),
    Holiday.REFORMATION_DAY: HolidaySpec(FixedDate(10, 31), "Reformationstag"),
    Holiday.ALL_SAINTS_DAY: HolidaySpec(FixedDate(11, 1), "Allerheiligen"),
    Holiday.DAY_OF_REPENTANCE: HolidaySpec(DayOfRepentance(), "Buß- und Bettag"),
    Holiday.CHRISTMAS_EVE: HolidaySpec(FixedDate(12, 24), "Heiligabend"),
    Holiday.CHRISTMAS_DAY_1: HolidaySpec(FixedDate(12, 25), "Erster Weihnachtsfeiertag"),
    Holiday.CHRISTMAS_DAY_2: HolidaySpec(FixedDate(12, 26), "Zweiter Weihnachtsfeiertag"),
    Holiday.NEW_YEARS_EVE: HolidaySpec(FixedDate(12, 31), "Silvester"),
})


def date_of(holiday: Holiday, year: int) -> Optional[date]:
    return holiday.date(year)


def name_of(holiday: Holiday) -> str:
    return holiday.description
