"""Date and text helpers shared by listing views and the CLI."""

from __future__ import annotations

from datetime import datetime, timezone


def parse_iso8601(value: str) -> datetime:
    """Parse an ISO 8601 timestamp string into a timezone-aware datetime.

    A trailing "Z" is accepted and naive values are treated as UTC.

    Raises:
        ValueError: If the value is not a valid ISO 8601 timestamp
    """
    raw = value.strip()
    if raw.endswith("Z"):
        raw = f"{raw[:-1]}+00:00"
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_date(value: str) -> str:
    """Format an ISO 8601 timestamp as a Japanese calendar date.

    Examples:
        >>> format_date("2026-01-09T10:00:00Z")
        '2026年1月9日'
        >>> format_date("not a date")
        'not a date'
    """
    try:
        parsed = parse_iso8601(value)
    except ValueError:
        return value
    return f"{parsed.year}年{parsed.month}月{parsed.day}日"


def format_relative_time(value: str, now: datetime | None = None) -> str:
    """Describe how long ago a timestamp was, in Japanese.

    Args:
        value: ISO 8601 timestamp
        now: Reference instant (defaults to the current UTC time)

    Returns:
        "今日", "昨日", "N日前", "N週間前", "Nヶ月前" or "N年前".
        Invalid timestamps are returned unchanged.
    """
    try:
        parsed = parse_iso8601(value)
    except ValueError:
        return value
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)

    diff_days = (now - parsed).days

    if diff_days <= 0:
        return "今日"
    if diff_days == 1:
        return "昨日"
    if diff_days < 7:
        return f"{diff_days}日前"
    if diff_days < 30:
        return f"{diff_days // 7}週間前"
    if diff_days < 365:
        return f"{diff_days // 30}ヶ月前"
    return f"{diff_days // 365}年前"


def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
