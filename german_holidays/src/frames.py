"""Holiday calendars as DataFrames: per-day frames and holiday flags."""

from datetime import date

import numpy as np
import pandas as pd

from .holidays import Holiday, description
from .regions import Region, holiday_dates_in_year


def _holiday_lookup(region: Region, years) -> dict[date, Holiday]:
    """Map date -> holiday for every year in `years`.

    On colliding dates the first holiday in catalogue order wins.
    """
    lookup: dict[date, Holiday] = {}
    for year in years:
        for day, holiday in holiday_dates_in_year(region, int(year)):
            lookup.setdefault(day, holiday)
    return lookup


def holiday_calendar(region: Region, start: date, end: date) -> pd.DataFrame:
    """Build a per-day calendar for `region` between `start` and `end` inclusive.

    Columns: date, weekday (Monday = 0), is_weekend, is_holiday, holiday
    (catalogue member name or None), description, is_working_day.
    """
    if end < start:
        raise ValueError(f"end ({end}) is before start ({start})")

    days = pd.date_range(start, end, freq="D")
    lookup = _holiday_lookup(region, range(start.year, end.year + 1))
    found = [lookup.get(d) for d in days.date]

    df = pd.DataFrame({"date": days.date})
    df["weekday"] = days.weekday
    df["is_weekend"] = (df["weekday"] >= 5).astype(int)
    df["is_holiday"] = [int(h is not None) for h in found]
    df["holiday"] = [h.name if h is not None else None for h in found]
    df["description"] = [description(h) if h is not None else None for h in found]
    df["is_working_day"] = np.where(
        (df["is_weekend"] == 0) & (df["is_holiday"] == 0), 1, 0
    )
    return df


def add_holiday_flags(
    df: pd.DataFrame, region: Region, column: str = "timestamp",
) -> pd.DataFrame:
    """Return a copy of `df` with is_holiday and is_working_day columns.

    `column` must hold datetimes; tz-aware values use their local date.
    Both flags are nullable Int64 and stay missing where the timestamp is NaT.
    """
    if column not in df.columns:
        raise KeyError(f"Column '{column}' not found")

    out = df.copy()
    stamps = pd.to_datetime(out[column])
    missing = stamps.isna()
    local_dates = stamps.dt.date
    lookup = _holiday_lookup(region, stamps.dt.year.dropna().unique())

    is_holiday = local_dates.map(lambda d: int(d in lookup)).astype(int)
    is_weekend = stamps.dt.weekday >= 5
    is_working_day = pd.Series(
        np.where(is_weekend | (is_holiday == 1), 0, 1), index=out.index
    )
    out["is_holiday"] = is_holiday.mask(missing).astype("Int64")
    out["is_working_day"] = is_working_day.mask(missing).astype("Int64")
    return out
