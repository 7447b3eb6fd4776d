"""Tests for current/longest streak calculation."""

from collections import namedtuple
from datetime import datetime, timedelta, timezone

from habit_tracker.analytics import StreakResult, calculate_streaks
from tests.conftest import TODAY

Record = namedtuple("Record", ["date", "completed"])


def _days_ago(*offsets, completed=True):
    return [Record(TODAY - timedelta(days=n), completed) for n in offsets]


def test_empty_input():
    assert calculate_streaks([], today=TODAY) == StreakResult(0, 0)
    assert calculate_streaks(None, today=TODAY) == StreakResult(0, 0)


def test_no_completed_records():
    result = calculate_streaks(_days_ago(0, 1, 2, completed=False), today=TODAY)
    assert (result.current_streak, result.longest_streak) == (0, 0)


def test_five_day_run_ending_today():
    result = calculate_streaks(_days_ago(4, 3, 2, 1, 0), today=TODAY)
    assert result.current_streak == 5
    assert result.longest_streak == 5


def test_run_ending_yesterday_is_still_current():
    result = calculate_streaks(_days_ago(3, 2, 1), today=TODAY)
    assert result.current_streak == 3
    assert result.longest_streak == 3


def test_lapsed_habit_has_no_current_streak():
    result = calculate_streaks(_days_ago(10, 9), today=TODAY)
    assert result.current_streak == 0
    assert result.longest_streak == 2


def test_gap_stops_the_backward_walk():
    result = calculate_streaks(_days_ago(5, 4, 2, 1, 0), today=TODAY)
    assert result.current_streak == 3
    assert result.longest_streak == 3


def test_current_streak_can_be_shorter_than_longest():
    result = calculate_streaks(_days_ago(10, 9, 8, 7, 6, 0), today=TODAY)
    assert result.current_streak == 1
    assert result.longest_streak == 5


def test_duplicate_days_do_not_inflate_streaks():
    records = _days_ago(2, 1, 1, 0, 0, 0)
    result = calculate_streaks(records, today=TODAY)
    assert result.current_streak == 3
    assert result.longest_streak == 3


def test_same_day_at_different_times_counts_once():
    day = datetime(TODAY.year, TODAY.month, TODAY.day, tzinfo=timezone.utc)
    records = [
        Record(day + timedelta(hours=1), True),
        Record(day + timedelta(hours=20), True),
        Record(day - timedelta(hours=3), True),
    ]
    result = calculate_streaks(records, today=TODAY)
    assert result.current_streak == 2
    assert result.longest_streak == 2


def test_order_does_not_matter():
    records = _days_ago(6, 5, 3, 2, 1, 0, 12)
    forward = calculate_streaks(records, today=TODAY)
    backward = calculate_streaks(list(reversed(records)), today=TODAY)
    shuffled = calculate_streaks(records[3:] + records[:3], today=TODAY)
    assert forward == backward == shuffled
    assert forward.current_streak == 4


def test_incomplete_records_break_runs():
    records = _days_ago(2, 0) + _days_ago(1, completed=False)
    result = calculate_streaks(records, today=TODAY)
    assert result.current_streak == 1
    assert result.longest_streak == 1


def test_future_completion_is_not_a_current_streak():
    result = calculate_streaks([Record(TODAY + timedelta(days=1), True)], today=TODAY)
    assert result.current_streak == 0
    assert result.longest_streak == 1


def test_invalid_dates_are_skipped_and_counted():
    records = _days_ago(1, 0) + [Record("garbage", True), Record(None, True), Record("garbage", False)]
    result = calculate_streaks(records, today=TODAY)
    assert result.current_streak == 2
    assert result.longest_streak == 2
    assert result.skipped_records == 2


def test_mapping_records_are_accepted():
    records = [
        {"date": (TODAY - timedelta(days=1)).isoformat(), "completed": True},
        {"date": TODAY.isoformat(), "completed": True},
    ]
    assert calculate_streaks(records, today=TODAY).current_streak == 2


def test_today_accepts_a_datetime():
    now = datetime(TODAY.year, TODAY.month, TODAY.day, 15, 0, tzinfo=timezone.utc)
    assert calculate_streaks(_days_ago(1, 0), today=now).current_streak == 2


def test_streaks_are_never_negative():
    for offsets in [(), (0,), (30, 1), (100, 99, 98)]:
        result = calculate_streaks(_days_ago(*offsets), today=TODAY)
        assert result.current_streak >= 0
        assert result.longest_streak >= 0


def test_unparseable_today_falls_back_to_the_clock(monkeypatch):
    monkeypatch.setattr("habit_tracker.analytics.streaks.today_utc", lambda: TODAY)
    result = calculate_streaks(_days_ago(1, 0), today="not-a-day")
    assert result.current_streak == 2
    assert result.longest_streak == 2


def test_only_real_true_marks_a_record_completed():
    records = [
        {"date": TODAY.isoformat(), "completed": "false"},
        {"date": TODAY.isoformat(), "completed": "true"},
        {"date": (TODAY - timedelta(days=1)).isoformat(), "completed": 1},
    ]
    assert calculate_streaks(records, today=TODAY) == StreakResult(0, 0)
