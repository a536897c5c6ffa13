"""Date and time utilities."""

from datetime import datetime, timezone


def now_iso() -> str:
    """Current UTC instant as ISO-8601 with millisecond precision and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.strftime('%Y-%m-%dT%H:%M:%S.') + f"{now.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse a stored ISO-8601 timestamp into an aware datetime."""
    if value.endswith('Z'):
        value = value[:-1] + '+00:00'
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def format_timestamp(value: str) -> str:
    """Render a stored timestamp in local time for display."""
    return parse_timestamp(value).astimezone().strftime('%Y-%m-%d %H:%M:%S')
