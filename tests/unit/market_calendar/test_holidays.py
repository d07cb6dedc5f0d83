import sys
from datetime import date
from types import SimpleNamespace

import pandas as pd
import pytest

from option_matrix.market_calendar import (
    US_MARKET_HOLIDAYS,
    holidays_from_exchange_calendar,
    load_holiday_file,
    normalize_holidays,
)


def test_static_table_covers_supported_years():
    assert "2024-12-25" in US_MARKET_HOLIDAYS
    assert "2026-07-03" in US_MARKET_HOLIDAYS
    assert "2024-12-24" not in US_MARKET_HOLIDAYS
    assert {h[:4] for h in US_MARKET_HOLIDAYS} == {"2024", "2025", "2026"}


def test_normalize_holidays_accepts_dates_and_strings():
    assert normalize_holidays([date(2027, 1, 1), " 2027-12-24 "]) == frozenset(
        {"2027-01-01", "2027-12-24"}
    )
    with pytest.raises(ValueError):
        normalize_holidays(["not-a-date"])


def test_load_holiday_file_reads_list_and_mapping(tmp_path):
    listed = tmp_path / "list.yml"
    listed.write_text("- 2027-01-01\n- '2027-01-18'\n", encoding="utf-8")
    mapped = tmp_path / "mapped.yml"
    mapped.write_text("holidays:\n  - 2027-02-15\n", encoding="utf-8")

    assert load_holiday_file(listed) == frozenset({"2027-01-01", "2027-01-18"})
    assert load_holiday_file(mapped) == frozenset({"2027-02-15"})


def test_load_holiday_file_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_holiday_file(tmp_path / "missing.yml")

    bad = tmp_path / "bad.yml"
    bad.write_text("just a string\n", encoding="utf-8")
    with pytest.raises(ValueError, match="YAML list"):
        load_holiday_file(bad)


def test_holidays_from_exchange_calendar_reports_weekday_closures(monkeypatch):
    sessions = pd.bdate_range("2024-01-01", "2024-01-31").drop(
        pd.DatetimeIndex(["2024-01-01", "2024-01-15"])
    )
    fake_cal = SimpleNamespace(
        first_session=pd.Timestamp("2023-01-03"),
        last_session=pd.Timestamp("2024-01-31"),
        sessions_in_range=lambda start, end: sessions,
    )
    fake_module = SimpleNamespace(get_calendar=lambda name: fake_cal)
    monkeypatch.setitem(sys.modules, "exchange_calendars", fake_module)

    holidays = holidays_from_exchange_calendar(2024, 2024)

    assert holidays == frozenset({"2024-01-01", "2024-01-15"})


def test_holidays_from_exchange_calendar_rejects_reversed_years():
    with pytest.raises(ValueError, match="end_year"):
        holidays_from_exchange_calendar(2025, 2024)


def test_xnys_holidays_match_static_table_for_2025():
    holidays = holidays_from_exchange_calendar(2025, 2025, cal_name="XNYS")
    static_2025 = {h for h in US_MARKET_HOLIDAYS if h.startswith("2025")}
    # XNYS also closed for the national day of mourning on 2025-01-09.
    assert static_2025 <= holidays
