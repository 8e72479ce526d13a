"""Tests for date formatting helpers."""

from datetime import datetime

import pytest

from minimal_task.utils.datetime import format_date, next_day, now_local


MOMENT = datetime(2024, 1, 2, 15, 4, 5)


class TestFormatDate:
    """Test moment-style and strftime formatting."""

    def test_default_pattern(self):
        assert format_date(MOMENT) == "2024-01-02"
        assert format_date(MOMENT, "") == "2024-01-02"

    @pytest.mark.parametrize("pattern,expected", [
        ("YYYY-MM-DD", "2024-01-02"),
        ("YY/M/D", "24/1/2"),
        ("MMMM Do, YYYY", "January 2nd, 2024"),
        ("ddd, MMM D", "Tue, Jan 2"),
        ("dddd", "Tuesday"),
        ("HH:mm", "15:04"),
        ("h:mm:ss A", "3:04:05 PM"),
        ("hh a", "03 pm"),
        ("YYYY년 MM월 DD일", "2024년 01월 02일"),
        ("[Week of] YYYY-MM-DD", "Week of 2024-01-02"),
    ])
    def test_moment_tokens(self, pattern, expected):
        assert format_date(MOMENT, pattern) == expected

    def test_strftime_pattern(self):
        assert format_date(MOMENT, "%d.%m.%Y") == "02.01.2024"

    @pytest.mark.parametrize("day,expected", [(1, "1st"), (11, "11th"), (12, "12th"), (13, "13th"), (22, "22nd"), (23, "23rd")])
    def test_ordinals(self, day, expected):
        assert format_date(datetime(2024, 1, day), "Do") == expected

    def test_midnight_is_twelve(self):
        assert format_date(datetime(2024, 1, 2, 0, 5), "h:mm a") == "12:05 am"


def test_next_day_crosses_year():
    assert next_day(datetime(2023, 12, 31, 8, 0)) == datetime(2024, 1, 1, 8, 0)


def test_now_local_is_aware():
    assert now_local().tzinfo is not None
