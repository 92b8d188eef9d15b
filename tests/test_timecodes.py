"""Tests for podcast_segmenter/timecodes.py."""

from datetime import datetime, timedelta, timezone

import pytest

from podcast_segmenter.timecodes import (
    calculate_total_duration,
    format_duration,
    format_srt_time,
    format_time,
    get_relative_time,
    is_valid_timestamp,
    parse_time,
)


class TestFormatTime:
    def test_zero(self):
        assert format_time(0) == "00:00"

    def test_under_an_hour(self):
        assert format_time(59) == "00:59"
        assert format_time(135) == "02:15"
        assert format_time(3599) == "59:59"

    def test_hours(self):
        assert format_time(3600) == "01:00:00"
        assert format_time(3723) == "01:02:03"

    def test_fraction_rounds_down(self):
        assert format_time(3725.9) == "01:02:05"

    def test_large_hour_count(self):
        assert format_time(360000) == "100:00:00"


class TestParseTime:
    def test_mmss(self):
        assert parse_time("02:15") == 135

    def test_hmmss(self):
        assert parse_time("1:02:03") == 3723
        assert parse_time("01:02:03") == 3723

    def test_wrong_field_count(self):
        assert parse_time("5") == 0
        assert parse_time("1:2:3:4") == 0

    def test_non_numeric(self):
        assert parse_time("ab:cd") == 0
        assert parse_time("") == 0

    def test_round_trip(self):
        for n in [0, 1, 59, 60, 599, 3599, 3600, 3661, 86399, 90061]:
            assert format_time(parse_time(format_time(n))) == format_time(n)


class TestFormatDuration:
    def test_zero(self):
        assert format_duration(0) == "0s"

    def test_seconds_only(self):
        assert format_duration(45) == "45s"

    def test_minutes_and_seconds(self):
        assert format_duration(150) == "2m 30s"

    def test_whole_minutes(self):
        assert format_duration(2700) == "45m"

    def test_seconds_hidden_with_hours(self):
        assert format_duration(5000) == "1h 23m"
        assert format_duration(3605) == "1h"


class TestFormatSrtTime:
    def test_whole_seconds(self):
        assert format_srt_time(65) == "00:01:05,000"

    def test_milliseconds(self):
        assert format_srt_time(3661.5) == "01:01:01,500"


class TestIsValidTimestamp:
    @pytest.mark.parametrize("value", ["1:02:03", "01:02:03", "12:34", "5:07", "00:00"])
    def test_valid(self, value):
        assert is_valid_timestamp(value) is True

    @pytest.mark.parametrize(
        "value", ["00:60", "1:60:00", "123:00:00", "abc", "12:34\n", "", "1:2:3:4"]
    )
    def test_invalid(self, value):
        assert is_valid_timestamp(value) is False


class TestCalculateTotalDuration:
    def test_takes_latest(self):
        assert calculate_total_duration(["00:30", "1:00:00", "12:00"]) == 3600

    def test_empty(self):
        assert calculate_total_duration([]) == 0


class TestGetRelativeTime:
    NOW = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

    def _ago(self, **kwargs):
        return get_relative_time(self.NOW - timedelta(**kwargs), now=self.NOW)

    def test_just_now(self):
        assert self._ago(seconds=30) == "Just now"

    def test_singular(self):
        assert self._ago(seconds=90) == "1 minute ago"

    def test_plural(self):
        assert self._ago(hours=2) == "2 hours ago"

    def test_weeks_months_years(self):
        assert self._ago(days=8) == "1 week ago"
        assert self._ago(days=35) == "1 month ago"
        assert self._ago(days=400) == "1 year ago"

    def test_default_now_uses_moment_timezone(self):
        moment = datetime.now(timezone.utc) - timedelta(hours=3, minutes=1)
        assert get_relative_time(moment) == "3 hours ago"
