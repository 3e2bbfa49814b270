from datetime import datetime, timezone

import pytest

from blog_content.utils.formatting import format_date, format_relative_time, parse_iso8601, truncate


def test_parse_iso8601_accepts_z_and_naive():
    assert parse_iso8601("2026-01-09T10:00:00Z") == datetime(2026, 1, 9, 10, tzinfo=timezone.utc)
    assert parse_iso8601("2026-01-09T10:00:00").tzinfo == timezone.utc
    with pytest.raises(ValueError):
        parse_iso8601("tomorrow")


def test_format_date():
    assert format_date("2026-01-09T10:00:00Z") == "2026年1月9日"
    assert format_date("2025-12-31") == "2025年12月31日"
    assert format_date("garbage") == "garbage"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2026-03-01T06:00:00Z", "今日"),
        ("2026-02-28T10:00:00Z", "昨日"),
        ("2026-02-25T12:00:00Z", "4日前"),
        ("2026-02-15T12:00:00Z", "2週間前"),
        ("2025-12-01T12:00:00Z", "3ヶ月前"),
        ("2024-02-01T12:00:00Z", "2年前"),
        ("invalid", "invalid"),
    ],
)
def test_format_relative_time(value, expected):
    now = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

    assert format_relative_time(value, now=now) == expected


def test_truncate():
    assert truncate("short", 10) == "short"
    assert truncate("exactly10!", 10) == "exactly10!"
    assert truncate("a much longer sentence", 6) == "a much..."
