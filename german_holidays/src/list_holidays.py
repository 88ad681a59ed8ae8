"""CLI entry point: print the public holidays of a German state.

Usage:
    python -m german_holidays.src.list_holidays --region BE --year 2019
    python -m german_holidays.src.list_holidays --region BY --date 2019-08-15
"""

import argparse
from datetime import date
from pathlib import Path

from .config import LANGUAGES, load_config
from .holidays import Holiday, description, german_name
from .regions import (
    EFFECTIVE_YEAR_FLOOR,
    Region,
    date_collisions,
    holiday_dates_in_year,
    holiday_from_date,
    region_name,
)

DAY_ABBR = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def _label(holiday: Holiday, language: str) -> str:
    return german_name(holiday) if language == "de" else description(holiday)


def print_year(region: Region, year: int, language: str) -> None:
    """Print a table of all holidays of `region` in `year`."""
    rows = holiday_dates_in_year(region, year)
    print(f"Public holidays in {region_name(region)} ({region.value}), {year}")

    if not rows:
        print(f"  No holidays known before {EFFECTIVE_YEAR_FLOOR}.")
        return

    print(f"  {'Date':<12} {'Day':<4} Holiday")
    print("  " + "-" * 40)
    for day, holiday in rows:
        print(f"  {day.isoformat():<12} {DAY_ABBR[day.weekday()]:<4} {_label(holiday, language)}")
    print("  " + "-" * 40)
    print(f"  Total: {len(rows)}")

    for day, kinds in date_collisions(region, year):
        names = ", ".join(_label(h, language) for h in kinds)
        print(f"  Warning: {day.isoformat()} carries several holidays ({names})")


def print_date(region: Region, day: date, language: str) -> None:
    """Print which holiday, if any, falls on `day` in `region`."""
    holiday = holiday_from_date(region, day)
    where = f"{region_name(region)} ({region.value})"
    if holiday is None:
        print(f"{day.isoformat()} is not a public holiday in {where}")
    else:
        print(f"{day.isoformat()} is {_label(holiday, language)} in {where}")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="List German public holidays per federal state")
    parser.add_argument(
        "--region", choices=[r.value for r in Region], default=None,
        help="Two-letter state code (default: from config.yaml)",
    )
    parser.add_argument(
        "--year", type=int, default=None,
        help="Year to list (default: current year)",
    )
    parser.add_argument(
        "--date", type=date.fromisoformat, default=None,
        help="Look up a single date (YYYY-MM-DD) instead of listing a year",
    )
    parser.add_argument(
        "--language", choices=LANGUAGES, default=None,
        help="Label language (default: from config.yaml)",
    )
    parser.add_argument(
        "--config", type=Path, default=None,
        help="Path to an alternative config.yaml",
    )
    args = parser.parse_args(argv)

    cfg = load_config(args.config)
    region = Region(args.region or cfg["default_region"])
    language = args.language or cfg["language"]

    if args.date is not None:
        print_date(region, args.date, language)
    else:
        year = args.year if args.year is not None else date.today().year
        print_year(region, year, language)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
