"""Tests for DataFrame calendars and holiday flags."""

from datetime import date

import pandas as pd
import pytest

from german_holidays.src.frames import add_holiday_flags, holiday_calendar
from german_holidays.src.regions import Region


class TestHolidayCalendar:
    def test_columns(self):
        df = holiday_calendar(Region.BERLIN, date(2019, 3, 1), date(2019, 3, 31))
        for col in (
            "date", "weekday", "is_weekend", "is_holiday",
            "holiday", "description", "is_working_day",
        ):
            assert col in df.columns
        assert len(df) == 31

    def test_womens_day_row(self):
        df = holiday_calendar(Region.BERLIN, date(2019, 3, 1), date(2019, 3, 31))
        row = df[df["date"] == date(2019, 3, 8)].iloc[0]
        assert row["is_holiday"] == 1
        assert row["holiday"] == "WOMENS_DAY"
        assert row["description"] == "Women's Day"
        assert row["is_working_day"] == 0

    def test_holiday_count_matches_year(self):
        df = holiday_calendar(Region.BAVARIA, date(2019, 1, 1), date(2019, 12, 31))
        assert len(df) == 365
        assert df["is_holiday"].sum() == 13

    def test_spans_year_boundary(self):
        df = holiday_calendar(Region.HESSE, date(2019, 12, 24), date(2020, 1, 2))
        holidays = df.loc[df["is_holiday"] == 1, "date"].tolist()
        assert holidays == [date(2019, 12, 25), date(2019, 12, 26), date(2020, 1, 1)]

    def test_working_days(self):
        """Week of German Unity Day 2019 (Thursday Oct 3)."""
        df = holiday_calendar(Region.HAMBURG, date(2019, 9, 30), date(2019, 10, 6))
        assert df["is_working_day"].tolist() == [1, 1, 1, 0, 1, 0, 0]
        assert df["is_weekend"].tolist() == [0, 0, 0, 0, 0, 1, 1]

    def test_flags_are_binary(self):
        df = holiday_calendar(Region.SAXONY, date(2020, 1, 1), date(2020, 12, 31))
        assert set(df["is_holiday"].unique()).issubset({0, 1})
        assert set(df["is_working_day"].unique()).issubset({0, 1})

    def test_collision_shows_first_holiday(self):
        df = holiday_calendar(Region.BERLIN, date(2008, 5, 1), date(2008, 5, 1))
        assert df["holiday"].iloc[0] == "LABOUR_DAY"

    def test_before_floor_has_no_holidays(self):
        df = holiday_calendar(Region.BAVARIA, date(1994, 12, 20), date(1994, 12, 31))
        assert df["is_holiday"].sum() == 0

    def test_inverted_range(self):
        with pytest.raises(ValueError):
            holiday_calendar(Region.BERLIN, date(2019, 2, 1), date(2019, 1, 1))


class TestAddHolidayFlags:
    def test_hourly_timestamps(self):
        timestamps = pd.date_range("2019-10-02", periods=72, freq="h", tz="Europe/Berlin")
        df = pd.DataFrame({"timestamp": timestamps, "load_w": range(72)})
        out = add_holiday_flags(df, Region.BAVARIA)
        assert "is_holiday" in out.columns
        assert "is_working_day" in out.columns
        assert "is_holiday" not in df.columns
        by_day = out.groupby(out["timestamp"].dt.date)["is_holiday"].max()
        assert by_day[date(2019, 10, 2)] == 0
        assert by_day[date(2019, 10, 3)] == 1
        assert by_day[date(2019, 10, 4)] == 0

    def test_custom_column(self):
        df = pd.DataFrame({"day": pd.to_datetime(["2019-03-08", "2019-03-11"])})
        out = add_holiday_flags(df, Region.BERLIN, column="day")
        assert out["is_holiday"].tolist() == [1, 0]
        assert out["is_working_day"].tolist() == [0, 1]

    def test_region_matters(self):
        df = pd.DataFrame({"timestamp": pd.to_datetime(["2019-11-20"])})
        assert add_holiday_flags(df, Region.SAXONY)["is_holiday"].iloc[0] == 1
        assert add_holiday_flags(df, Region.BERLIN)["is_holiday"].iloc[0] == 0

    def test_missing_timestamps_stay_missing(self):
        df = pd.DataFrame({"timestamp": pd.to_datetime(["2019-10-03", None, "2019-10-07"])})
        out = add_holiday_flags(df, Region.BAVARIA)
        assert out["is_holiday"].tolist()[0] == 1
        assert out["is_holiday"].tolist()[2] == 0
        assert out["is_working_day"].tolist()[2] == 1
        assert pd.isna(out["is_holiday"].iloc[1])
        assert pd.isna(out["is_working_day"].iloc[1])

    def test_missing_column(self):
        df = pd.DataFrame({"value": [1, 2]})
        with pytest.raises(KeyError):
            add_holiday_flags(df, Region.BERLIN)
