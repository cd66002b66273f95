"""UTC datetime utilities."""

from datetime import date, datetime, time, timedelta, timezone


def utc_now() -> datetime:
    """Return timezone-aware UTC now."""
    return datetime.now(timezone.utc)


def parse_iso_date(value: str | None) -> date | None:
    """Parse an ISO-8601 date or datetime string to its calendar date.

    Accepts both ``2024-05-01`` and the ``toISOString()`` form
    ``2024-05-01T18:00:00.000Z``. Returns None for anything unparseable,
    including offsets that push the UTC date outside the representable range.
    """
    if not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        try:
            return date.fromisoformat(text)
        except ValueError:
            return None
    if parsed.tzinfo is not None:
        try:
            parsed = parsed.astimezone(timezone.utc)
        except OverflowError:
            return None
    return parsed.date()


def day_bounds(day: date) -> tuple[datetime, datetime | None]:
    """Return the [start, end) UTC datetimes covering one calendar day.

    The end is None (open) for date.max, whose next day is not representable.
    """
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    if day == date.max:
        return start, None
    return start, start + timedelta(days=1)
