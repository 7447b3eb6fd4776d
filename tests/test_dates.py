from datetime import date, datetime, timedelta, timezone

import pytest

from habit_tracker.analytics import InvalidDateError, days_apart, to_utc_day, today_utc


def test_naive_datetime_is_treated_as_utc():
    assert to_utc_day(datetime(2025, 7, 13, 23, 59, 59)) == date(2025, 7, 13)


def test_aware_datetime_is_converted_to_utc_day():
    ahead = timezone(timedelta(hours=5))
    behind = timezone(timedelta(hours=-5))
    assert to_utc_day(datetime(2025, 7, 14, 2, 0, tzinfo=ahead)) == date(2025, 7, 13)
    assert to_utc_day(datetime(2025, 7, 13, 21, 0, tzinfo=behind)) == date(2025, 7, 14)


def test_same_utc_day_maps_to_same_value():
    morning = datetime(2025, 7, 13, 0, 0, tzinfo=timezone.utc)
    night = datetime(2025, 7, 13, 23, 59, tzinfo=timezone.utc)
    assert to_utc_day(morning) == to_utc_day(night)


def test_iso_strings():
    assert to_utc_day("2025-07-13") == date(2025, 7, 13)
    assert to_utc_day("2025-07-13T22:30:00Z") == date(2025, 7, 13)
    assert to_utc_day("2025-07-13T22:30:00-04:00") == date(2025, 7, 14)


def test_plain_date_passes_through():
    assert to_utc_day(date(2024, 2, 29)) == date(2024, 2, 29)


@pytest.mark.parametrize("value", [None, "", "not-a-date", "2025-02-30", 12345, object()])
def test_invalid_values_raise(value):
    with pytest.raises(InvalidDateError):
        to_utc_day(value)


def test_invalid_date_error_is_value_error():
    assert issubclass(InvalidDateError, ValueError)


def test_days_apart_is_absolute_and_crosses_dst_and_leap_days():
    assert days_apart(date(2025, 3, 1), date(2025, 3, 31)) == 30
    assert days_apart(date(2025, 3, 31), date(2025, 3, 1)) == 30
    assert days_apart(date(2024, 2, 28), date(2024, 3, 1)) == 2
    assert days_apart(date(2025, 7, 13), date(2025, 7, 13)) == 0


def test_today_utc_uses_given_clock():
    now = datetime(2025, 7, 20, 23, 30, tzinfo=timezone(timedelta(hours=-3)))
    assert today_utc(now) == date(2025, 7, 21)


def test_today_utc_defaults_to_system_clock():
    before = datetime.now(timezone.utc).date()
    result = today_utc()
    after = datetime.now(timezone.utc).date()
    assert result in (before, after)
