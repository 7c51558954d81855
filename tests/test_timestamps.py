from datetime import datetime, timezone

from ecswatch.summary.timestamps import newest_time, to_datetime


def test_to_datetime_keeps_milliseconds():
    assert to_datetime(1_600_000_000.123) == datetime(2020, 9, 13, 12, 26, 40, 123000)


def test_to_datetime_rounds_to_nearest_millisecond():
    assert to_datetime(10.0006) == datetime(1970, 1, 1, 0, 0, 10, 1000)
    assert to_datetime(10.9996) == datetime(1970, 1, 1, 0, 0, 11)


def test_newest_time_picks_the_maximum():
    times = [None, 1_600_000_000.5, 1_600_000_100.25, None, 1_599_999_999.0]
    assert newest_time(times) == to_datetime(1_600_000_100.25)


def test_newest_time_accepts_aware_datetimes():
    created = datetime(2024, 1, 2, 3, 4, 5, 678000, tzinfo=timezone.utc)
    started = datetime(2024, 1, 2, 3, 5, 0, tzinfo=timezone.utc)
    assert newest_time([created, None, started]) == datetime(2024, 1, 2, 3, 5, 0)


def test_newest_time_mixes_numbers_and_datetimes():
    started = datetime(1970, 1, 1, 0, 1, 0, tzinfo=timezone.utc)
    assert newest_time([30.0, started]) == datetime(1970, 1, 1, 0, 1, 0)
    assert newest_time([90.5, started]) == datetime(1970, 1, 1, 0, 1, 30, 500000)


def test_newest_time_falls_back_to_now():
    assert newest_time([None, None], now=lambda: 42.0) == datetime(1970, 1, 1, 0, 0, 42)
    assert newest_time([], now=lambda: 42.0) == datetime(1970, 1, 1, 0, 0, 42)


def test_newest_time_default_now_is_current_time():
    before = datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)
    result = newest_time([])
    after = datetime.now(timezone.utc).replace(tzinfo=None)
    assert before <= result <= after
