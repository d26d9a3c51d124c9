from datetime import datetime, timedelta, timezone

MILLISECOND = timedelta(milliseconds=1)


def utcnow():
    """
    Current UTC time as a naive datetime, truncated to milliseconds
    (the precision MongoDB keeps for dates).

    Wrapped so tests can patch it.
    """
    now = datetime.now(timezone.utc).replace(tzinfo=None)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_date(value):
    """
    Parse an ISO-8601 date or date-time string into a naive UTC datetime.
    Returns None when the value is empty or cannot be parsed. Values whose
    UTC equivalent is out of range are clamped to datetime.min / datetime.max.
    """
    if not value or not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None

    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        except OverflowError:
            # UTC instant falls outside year 1..9999, pin to the nearest end
            parsed = datetime.min if parsed.year == datetime.min.year else datetime.max
    return parsed


def format_datetime(value):
    # 2023-12-25T12:00:00.000Z
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc).replace(tzinfo=None)
    return value.strftime("%Y-%m-%dT%H:%M:%S.") + f"{value.microsecond // 1000:03d}Z"


def elapsed_milliseconds(start, end):
    """Signed whole milliseconds between two datetimes (end - start)."""
    return (end - start) // MILLISECOND
