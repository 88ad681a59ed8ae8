"""German federal states and the holidays each of them observes.

Holidays are only provided from 1995 onward. Regional sets depend on the
year where state law changed; the boundary years live in `Legislation`.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from types import MappingProxyType

from .holidays import Holiday, derive_date

EFFECTIVE_YEAR_FLOOR = 1995


class Region(Enum):
    """German federal states, keyed by their two-letter code."""

    BADEN_WUERTTEMBERG = "BW"
    # The Augsburg Peace Festival only applies to Augsburg and is excluded;
    # use date_of(Holiday.AUGSBURG_PEACE_FESTIVAL, year) for it.
    # Assumption Day applies to communities with a catholic majority, which
    # is most of them, so it is included.
    BAVARIA = "BY"
    BERLIN = "BE"
    BRANDENBURG = "BB"
    BREMEN = "HB"
    HAMBURG = "HH"
    HESSE = "HE"
    MECKLENBURG_WESTERN_POMERANIA = "MV"
    LOWER_SAXONY = "NI"
    NORTH_RHINE_WESTPHALIA = "NW"
    RHINELAND_PALATINATE = "RP"
    SAARLAND = "SL"
    SAXONY = "SN"
    SAXONY_ANHALT = "ST"
    SCHLESWIG_HOLSTEIN = "SH"
    THURINGIA = "TH"


REGION_NAMES = MappingProxyType({
    Region.BADEN_WUERTTEMBERG: "Baden-Württemberg",
    Region.BAVARIA: "Bavaria",
    Region.BERLIN: "Berlin",
    Region.BRANDENBURG: "Brandenburg",
    Region.BREMEN: "Bremen",
    Region.HAMBURG: "Hamburg",
    Region.HESSE: "Hesse",
    Region.MECKLENBURG_WESTERN_POMERANIA: "Mecklenburg-Western Pomerania",
    Region.LOWER_SAXONY: "Lower Saxony",
    Region.NORTH_RHINE_WESTPHALIA: "North Rhine-Westphalia",
    Region.RHINELAND_PALATINATE: "Rhineland-Palatinate",
    Region.SAARLAND: "Saarland",
    Region.SAXONY: "Saxony",
    Region.SAXONY_ANHALT: "Saxony-Anhalt",
    Region.SCHLESWIG_HOLSTEIN: "Schleswig-Holstein",
    Region.THURINGIA: "Thuringia",
})

NATIONAL_HOLIDAYS: frozenset[Holiday] = frozenset({
    Holiday.NEW_YEARS_DAY,
    Holiday.GOOD_FRIDAY,
    Holiday.EASTER_MONDAY,
    Holiday.LABOUR_DAY,
    Holiday.ASCENSION_DAY,
    Holiday.WHIT_MONDAY,
    Holiday.GERMAN_UNITY_DAY,
    Holiday.CHRISTMAS_DAY,
    Holiday.SECOND_CHRISTMAS_DAY,
})


@dataclass(frozen=True)
class Legislation:
    """Years in which state holiday law changed.

    `*_since` fields are the first year a holiday is observed. `*_years`
    fields list one-off years.
    """

    berlin_womens_day_since: int = 2019
    berlin_liberation_day_years: frozenset[int] = frozenset({2020, 2025})
    mecklenburg_womens_day_since: int = 2023
    thuringia_childrens_day_since: int = 2019
    # Bremen, Hamburg, Lower Saxony and Schleswig-Holstein
    northern_reformation_day_since: int = 2018
    # 500th anniversary of the Reformation, observed nationwide
    reformation_anniversary_year: int = 2017


LEGISLATION = Legislation()

_NORTHERN_STATES = frozenset({
    Region.BREMEN,
    Region.HAMBURG,
    Region.LOWER_SAXONY,
    Region.SCHLESWIG_HOLSTEIN,
})

# Regional holidays that do not depend on the year
_STATIC_ADDITIONS = MappingProxyType({
    Region.BADEN_WUERTTEMBERG: (Holiday.EPIPHANY, Holiday.CORPUS_CHRISTI, Holiday.ALL_SAINTS_DAY),
    Region.BAVARIA: (
        Holiday.EPIPHANY,
        Holiday.CORPUS_CHRISTI,
        Holiday.ASSUMPTION_DAY,
        Holiday.ALL_SAINTS_DAY,
    ),
    Region.BERLIN: (),
    Region.BRANDENBURG: (Holiday.REFORMATION_DAY,),
    Region.BREMEN: (),
    Region.HAMBURG: (),
    Region.HESSE: (Holiday.CORPUS_CHRISTI,),
    Region.MECKLENBURG_WESTERN_POMERANIA: (Holiday.REFORMATION_DAY,),
    Region.LOWER_SAXONY: (),
    Region.NORTH_RHINE_WESTPHALIA: (Holiday.CORPUS_CHRISTI, Holiday.ALL_SAINTS_DAY),
    Region.RHINELAND_PALATINATE: (Holiday.CORPUS_CHRISTI, Holiday.ALL_SAINTS_DAY),
    Region.SAARLAND: (Holiday.CORPUS_CHRISTI, Holiday.ASSUMPTION_DAY, Holiday.ALL_SAINTS_DAY),
    Region.SAXONY: (Holiday.REFORMATION_DAY, Holiday.REPENTANCE_DAY),
    Region.SAXONY_ANHALT: (Holiday.EPIPHANY, Holiday.REFORMATION_DAY),
    Region.SCHLESWIG_HOLSTEIN: (),
    Region.THURINGIA: (Holiday.REFORMATION_DAY,),
})


def region_name(region: Region) -> str:
    """Display name of a federal state."""
    return REGION_NAMES[region]


def regional_additions(
    region: Region, year: int, legislation: Legislation = LEGISLATION,
) -> tuple[Holiday, ...]:
    """Holidays observed in `region` on top of the national ones in `year`."""
    additions = set(_STATIC_ADDITIONS[region])

    if region is Region.BERLIN:
        if year >= legislation.berlin_womens_day_since:
            additions.add(Holiday.WOMENS_DAY)
        if year in legislation.berlin_liberation_day_years:
            additions.add(Holiday.LIBERATION_DAY)
    elif region is Region.MECKLENBURG_WESTERN_POMERANIA:
        if year >= legislation.mecklenburg_womens_day_since:
            additions.add(Holiday.WOMENS_DAY)
    elif region is Region.THURINGIA:
        if year >= legislation.thuringia_childrens_day_since:
            additions.add(Holiday.WORLD_CHILDRENS_DAY)
    elif region in _NORTHERN_STATES:
        if year >= legislation.northern_reformation_day_since:
            additions.add(Holiday.REFORMATION_DAY)

    if year == legislation.reformation_anniversary_year:
        additions.add(Holiday.REFORMATION_DAY)

    return tuple(h for h in Holiday if h in additions)


def holidays_in_year(
    region: Region, year: int, legislation: Legislation = LEGISLATION,
) -> tuple[Holiday, ...]:
    """Return all holidays of `region` in `year`, in catalogue order.

    Empty for years before EFFECTIVE_YEAR_FLOOR.
    """
    if year < EFFECTIVE_YEAR_FLOOR:
        return ()
    observed = NATIONAL_HOLIDAYS | set(regional_additions(region, year, legislation))
    return tuple(h for h in Holiday if h in observed)


def holiday_dates_in_year(
    region: Region, year: int, legislation: Legislation = LEGISLATION,
) -> list[tuple[date, Holiday]]:
    """Return (date, holiday) pairs sorted by date.

    Holidays falling on the same date keep catalogue order.
    """
    pairs = []
    for holiday in holidays_in_year(region, year, legislation):
        day = derive_date(holiday, year)
        if day is not None:
            pairs.append((day, holiday))
    return sorted(pairs, key=lambda pair: pair[0])


def holiday_from_date(
    region: Region, day: date, legislation: Legislation = LEGISLATION,
) -> Holiday | None:
    """Return the holiday on `day`, or None.

    If two holidays fall on the same date the first one in catalogue
    order is returned (Labour Day over Ascension Day when Easter is on
    March 23).
    """
    for holiday in holidays_in_year(region, day.year, legislation):
        if derive_date(holiday, day.year) == day:
            return holiday
    return None


def is_holiday(region: Region, day: date, legislation: Legislation = LEGISLATION) -> bool:
    """Check if a date is a public holiday in `region`."""
    return holiday_from_date(region, day, legislation) is not None


def date_collisions(
    region: Region, year: int, legislation: Legislation = LEGISLATION,
) -> list[tuple[date, tuple[Holiday, ...]]]:
    """Dates on which more than one holiday of `region` falls in `year`."""
    by_date: dict[date, list[Holiday]] = {}
    for day, holiday in holiday_dates_in_year(region, year, legislation):
        by_date.setdefault(day, []).append(holiday)
    return [(day, tuple(kinds)) for day, kinds in by_date.items() if len(kinds) > 1]
