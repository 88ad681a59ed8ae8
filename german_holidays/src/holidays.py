"""German holiday catalogue. Pure computation, no external dependencies.

Every holiday kind carries one label and one date rule: a fixed month/day,
an offset from Easter Sunday, or a computed rule (Repentance Day).
"""

from dataclasses import dataclass
from datetime import date, timedelta
from enum import Enum
from types import MappingProxyType

# Weekday indices with Monday = 0, as returned by date.weekday()
THURSDAY = 3
WEDNESDAY = 2


def easter_sunday(year: int) -> date | None:
    """Compute Easter Sunday using the Anonymous Gregorian algorithm.

    Returns None for years that datetime.date cannot represent.
    """
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
    try:
        return date(year, month, day + 1)
    except (ValueError, OverflowError):
        return None


def repentance_day(year: int) -> date | None:
    """Buß- und Bettag: the last Wednesday strictly before November 23."""
    try:
        reference = date(year, 11, 23)
    except (ValueError, OverflowError):
        return None
    weekday = reference.weekday()
    if weekday < THURSDAY:
        # Monday..Wednesday: go back into the previous week
        days_back = weekday + 5
    else:
        days_back = weekday - 2
    return reference - timedelta(days=days_back)


# --- date rules --------------------------------------------------------------

@dataclass(frozen=True)
class FixedDate:
    month: int
    day: int


@dataclass(frozen=True)
class EasterOffset:
    days: int


@dataclass(frozen=True)
class Computed:
    name: str


_COMPUTED_RULES = MappingProxyType({
    "repentance_day": repentance_day,
})


class Holiday(Enum):
    """Closed catalogue of recurring German holidays, in definition order."""

    NEW_YEARS_DAY = "new_years_day"
    EPIPHANY = "epiphany"
    WOMENS_DAY = "womens_day"
    GOOD_FRIDAY = "good_friday"
    EASTER_MONDAY = "easter_monday"
    LABOUR_DAY = "labour_day"
    LIBERATION_DAY = "liberation_day"
    ASCENSION_DAY = "ascension_day"
    WHIT_MONDAY = "whit_monday"
    CORPUS_CHRISTI = "corpus_christi"
    AUGSBURG_PEACE_FESTIVAL = "augsburg_peace_festival"
    ASSUMPTION_DAY = "assumption_day"
    WORLD_CHILDRENS_DAY = "world_childrens_day"
    GERMAN_UNITY_DAY = "german_unity_day"
    REFORMATION_DAY = "reformation_day"
    ALL_SAINTS_DAY = "all_saints_day"
    REPENTANCE_DAY = "repentance_day"
    CHRISTMAS_DAY = "christmas_day"
    SECOND_CHRISTMAS_DAY = "second_christmas_day"


# Holiday -> (label, German name, rule)
CATALOGUE: MappingProxyType = MappingProxyType({
    Holiday.NEW_YEARS_DAY:           ("New Year's Day",          "Neujahr",                   FixedDate(1, 1)),
    Holiday.EPIPHANY:                ("Epiphany",                "Heilige Drei Könige",       FixedDate(1, 6)),
    Holiday.WOMENS_DAY:              ("Women's Day",             "Frauentag",                 FixedDate(3, 8)),
    Holiday.GOOD_FRIDAY:             ("Good Friday",             "Karfreitag",                EasterOffset(-2)),
    Holiday.EASTER_MONDAY:           ("Easter Monday",           "Ostermontag",               EasterOffset(1)),
    Holiday.LABOUR_DAY:              ("Labour Day",              "Erster Mai",                FixedDate(5, 1)),
    Holiday.LIBERATION_DAY:          ("Liberation Day",          "Tag der Befreiung",         FixedDate(5, 8)),
    Holiday.ASCENSION_DAY:           ("Ascension Day",           "Christi Himmelfahrt",       EasterOffset(39)),
    Holiday.WHIT_MONDAY:             ("Whit Monday",             "Pfingstmontag",             EasterOffset(50)),
    Holiday.CORPUS_CHRISTI:          ("Corpus Christi",          "Fronleichnam",              EasterOffset(60)),
    Holiday.AUGSBURG_PEACE_FESTIVAL: ("Augsburg Peace Festival", "Augsburger Friedensfest",   FixedDate(8, 8)),
    Holiday.ASSUMPTION_DAY:          ("Assumption Day",          "Mariä Himmelfahrt",         FixedDate(8, 15)),
    Holiday.WORLD_CHILDRENS_DAY:     ("World Children's Day",    "Weltkindertag",             FixedDate(9, 20)),
    Holiday.GERMAN_UNITY_DAY:        ("German Unity Day",        "Tag der Deutschen Einheit", FixedDate(10, 3)),
    Holiday.REFORMATION_DAY:         ("Reformation Day",         "Reformationstag",           FixedDate(10, 31)),
    Holiday.ALL_SAINTS_DAY:          ("All Saints' Day",         "Allerheiligen",             FixedDate(11, 1)),
    Holiday.REPENTANCE_DAY:          ("Repentance Day",          "Buß- und Bettag",           Computed("repentance_day")),
    Holiday.CHRISTMAS_DAY:           ("Christmas Day",           "1. Weihnachtsfeiertag",     FixedDate(12, 25)),
    Holiday.SECOND_CHRISTMAS_DAY:    ("Second Day of Christmas", "2. Weihnachtsfeiertag",     FixedDate(12, 26)),
})


def derive_date(kind: Holiday, year: int) -> date | None:
    """Return the date of `kind` in `year`, or None if it is not representable."""
    rule = CATALOGUE[kind][2]
    if isinstance(rule, FixedDate):
        try:
            return date(year, rule.month, rule.day)
        except (ValueError, OverflowError):
            return None
    if isinstance(rule, EasterOffset):
        easter = easter_sunday(year)
        if easter is None:
            return None
        try:
            return easter + timedelta(days=rule.days)
        except OverflowError:
            return None
    if isinstance(rule, Computed):
        return _COMPUTED_RULES[rule.name](year)
    raise TypeError(f"Unknown date rule for {kind}: {rule!r}")


def date_of(kind: Holiday, year: int) -> date | None:
    """Date of a holiday regardless of whether any region observes it."""
    return derive_date(kind, year)


def falls_on(kind: Holiday, day: date) -> bool:
    """True if `day` is the date of `kind` in its year."""
    return derive_date(kind, day.year) == day


def description(kind: Holiday) -> str:
    """English label for display."""
    return CATALOGUE[kind][0]


def german_name(kind: Holiday) -> str:
    """Official German name."""
    return CATALOGUE[kind][1]
