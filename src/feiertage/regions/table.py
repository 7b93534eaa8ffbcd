from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional

from feiertage.holidays import Holiday
from ._exceptions import RegionError

H = Holiday

FIRST_YEAR: int = 1995
REFORMATION_ANNIVERSARY: int = 2017


class Region(Enum):
    """
    German federal states, split where the public holidays differ within a
    state.

    Holidays guaranteed to fall on a Sunday (Easter Sunday, Whit Sunday) are
    never listed; fixed-date holidays can still fall on a Sunday.
    """

    BADEN_WUERTTEMBERG = "DE-BW"
    BAYERN_EV = "DE-BY-EV"          # communities with a Protestant majority
    BAYERN_KATH = "DE-BY-KATH"      # Catholic majority, without Augsburg
    AUGSBURG = "DE-BY-A"
    BERLIN = "DE-BE"
    BRANDENBURG = "DE-BB"
    BREMEN = "DE-HB"
    HAMBURG = "DE-HH"
    HESSEN = "DE-HE"
    MECKLENBURG_VORPOMMERN = "DE-MV"
    NIEDERSACHSEN = "DE-NI"
    NORDRHEIN_WESTFALEN = "DE-NW"
    RHEINLAND_PFALZ = "DE-RP"
    SAARLAND = "DE-SL"
    SACHSEN = "DE-SN"
    SACHSEN_FRONLEICHNAM = "DE-SN-FL"
    SACHSEN_ANHALT = "DE-ST"
    SCHLESWIG_HOLSTEIN = "DE-SH"
    THUERINGEN = "DE-TH"
    THUERINGEN_FRONLEICHNAM = "DE-TH-FL"

    @property
    def state(self) -> str:
        """ISO 3166-2 code of the federal state the region belongs to."""
        return "-".join(self.value.split("-")[:2])

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    @classmethod
    def from_state(cls, code: str) -> tuple[Region, ...]:
        """All regions of a federal state, e.g. ``"DE-BY"`` or ``"by"``."""
        key = code.strip().upper()
        if not key.startswith("DE-"):
            key = f"DE-{key}"
        regions = tuple(region for region in cls if region.state == key)
        if not regions:
            raise RegionError(f"No German federal state with code {code!r}.")
        return regions

    def __repr__(self) -> str:
        return f"Region.{self.name}"


_DESCRIPTIONS: dict[Region, str] = {
    Region.BADEN_WUERTTEMBERG: "Baden-Württemberg",
    Region.BAYERN_EV: "Bayern (evangelisch)",
    Region.BAYERN_KATH: "Bayern (katholisch)",
    Region.AUGSBURG: "Augsburg",
    Region.BERLIN: "Berlin",
    Region.BRANDENBURG: "Brandenburg",
    Region.BREMEN: "Bremen",
    Region.HAMBURG: "Hamburg",
    Region.HESSEN: "Hessen",
    Region.MECKLENBURG_VORPOMMERN: "Mecklenburg-Vorpommern",
    Region.NIEDERSACHSEN: "Niedersachsen",
    Region.NORDRHEIN_WESTFALEN: "Nordrhein-Westfalen",
    Region.RHEINLAND_PFALZ: "Rheinland-Pfalz",
    Region.SAARLAND: "Saarland",
    Region.SACHSEN: "Sachsen (ohne Fronleichnam)",
    Region.SACHSEN_FRONLEICHNAM: "Sachsen (mit Fronleichnam)",
    Region.SACHSEN_ANHALT: "Sachsen-Anhalt",
    Region.SCHLESWIG_HOLSTEIN: "Schleswig-Holstein",
    Region.THUERINGEN: "Thüringen (ohne Fronleichnam)",
    Region.THUERINGEN_FRONLEICHNAM: "Thüringen (mit Fronleichnam)",
}


# ── holiday schedules ────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class Schedule:
    """
    Region-specific holidays, with at most one legal change.

    From ``changed_in`` onward ``holidays`` applies; before it ``previously``.
    """

    holidays: tuple[Holiday, ...]
    changed_in: Optional[int] = None
    previously: tuple[Holiday, ...] = ()

    def holidays_in(self, year: int) -> tuple[Holiday, ...]:
        if self.changed_in is not None and year < self.changed_in:
            return self.previously
        return self.holidays


NATIONWIDE: tuple[Holiday, ...] = (
    H.NEW_YEAR,
    H.GOOD_FRIDAY,
    H.EASTER_MONDAY,
    H.LABOUR_DAY,
    H.ASCENSION_DAY,
    H.WHIT_MONDAY,
    H.GERMAN_UNITY_DAY,     # Einigungsvertrag, Art. 2
    H.CHRISTMAS_DAY_1,
    H.CHRISTMAS_DAY_2,
)

SCHEDULES: MappingProxyType[Region, Schedule] = MappingProxyType({
    Region.BADEN_WUERTTEMBERG: Schedule((H.EPIPHANY, H.CORPUS_CHRISTI, H.ALL_SAINTS_DAY)),
    Region.BAYERN_EV: Schedule((H.EPIPHANY, H.CORPUS_CHRISTI, H.ALL_SAINTS_DAY)),
    Region.BAYERN_KATH: Schedule(
        (H.EPIPHANY, H.CORPUS_CHRISTI, H.ASSUMPTION_DAY, H.ALL_SAINTS_DAY)
    ),
    Region.AUGSBURG: Schedule(
        (
            H.EPIPHANY,
            H.CORPUS_CHRISTI,
            H.AUGSBURG_PEACE_FESTIVAL,
            H.ASSUMPTION_DAY,
            H.ALL_SAINTS_DAY,
        )
    ),
    Region.BERLIN: Schedule((H.WOMENS_DAY,), changed_in=2019),
    Region.BRANDENBURG: Schedule((H.REFORMATION_DAY,)),
    Region.BREMEN: Schedule((H.REFORMATION_DAY,), changed_in=2017),
    Region.HAMBURG: Schedule((H.REFORMATION_DAY,), changed_in=2017),
    Region.HESSEN: Schedule((H.CORPUS_CHRISTI,)),
    Region.MECKLENBURG_VORPOMMERN: Schedule(
        (H.WOMENS_DAY, H.REFORMATION_DAY),
        changed_in=2023,
        previously=(H.REFORMATION_DAY,),
    ),
    Region.NIEDERSACHSEN: Schedule((H.REFORMATION_DAY,), changed_in=2017),
    Region.NORDRHEIN_WESTFALEN: Schedule((H.CORPUS_CHRISTI, H.ALL_SAINTS_DAY)),
    Region.RHEINLAND_PFALZ: Schedule((H.CORPUS_CHRISTI, H.ALL_SAINTS_DAY)),
    Region.SAARLAND: Schedule((H.CORPUS_CHRISTI, H.ASSUMPTION_DAY, H.ALL_SAINTS_DAY)),
    Region.SACHSEN: Schedule((H.REFORMATION_DAY, H.DAY_OF_REPENTANCE)),
    Region.SACHSEN_FRONLEICHNAM: Schedule(
        (H.CORPUS_CHRISTI, H.REFORMATION_DAY, H.DAY_OF_REPENTANCE)
    ),
    Region.SACHSEN_ANHALT: Schedule((H.EPIPHANY, H.REFORMATION_DAY)),
    Region.SCHLESWIG_HOLSTEIN: Schedule((H.REFORMATION_DAY,), changed_in=2017),
    Region.THUERINGEN: Schedule(
        (H.CHILDRENS_DAY, H.REFORMATION_DAY),
        changed_in=2019,
        previously=(H.REFORMATION_DAY,),
    ),
    Region.THUERINGEN_FRONLEICHNAM: Schedule(
        (H.CORPUS_CHRISTI, H.REFORMATION_DAY),
        changed_in=2019,
        previously=(H.CORPUS_CHRISTI, H.CHILDRENS_DAY, H.REFORMATION_DAY),
    ),
})


# ── lookups ──────────────────────────────────────────────────────────────────

def nationwide_holidays() -> tuple[Holiday, ...]:
    return NATIONWIDE


def region_specific_holidays(region: Region, year: int) -> tuple[Holiday, ...]:
    return SCHEDULES[region].holidays_in(year)


def holidays_in_year(region: Region, year: int) -> tuple[Holiday, ...]:
    """
    Public holidays of ``region`` in ``year``, nationwide ones first.

    Empty for years before 1995.  In 2017 every region observes Reformation
    Day for the 500th anniversary of the Reformation.
    """
    if year < FIRST_YEAR:
        return ()
    holidays = NATIONWIDE + region_specific_holidays(region, year)
    if year == REFORMATION_ANNIVERSARY and H.REFORMATION_DAY not in holidays:
        holidays += (H.REFORMATION_DAY,)
    return holidays
