"""Date helpers for coursework windows and report display.

All instants are UTC. A calendar-date filter covers the whole UTC day:
``start_of_day`` is its first instant and ``end_of_day`` its last millisecond.
"""

from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, Optional

from classroom_reports.core.errors import ValidationError
from classroom_reports.schemas.coursework import CourseworkItem


def parse_iso_date(value: Optional[str], field: str) -> Optional[date]:
    if value is None or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip())
    except ValueError:
        raise ValidationError(f"{field} must be a date in YYYY-MM-DD format, got {value!r}")


def start_of_day(d: date) -> datetime:
    return datetime.combine(d, time.min, tzinfo=timezone.utc)


def end_of_day(d: date) -> datetime:
    return start_of_day(d) + timedelta(days=1) - timedelta(milliseconds=1)


def _as_utc(dt: datetime) -> datetime:
    # naive upstream timestamps are treated as UTC
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def due_instant(item: CourseworkItem) -> Optional[datetime]:
    if item.due_date is None:
        return None

    due_time = item.due_time
    return datetime(
        item.due_date.year,
        item.due_date.month,
        item.due_date.day,
        (due_time.hours if due_time and due_time.hours is not None else 0),
        (due_time.minutes if due_time and due_time.minutes is not None else 0),
        (due_time.seconds if due_time and due_time.seconds is not None else 0),
        tzinfo=timezone.utc,
    )


def coursework_timestamp(item: CourseworkItem) -> Optional[datetime]:
    due = due_instant(item)
    if due is not None:
        return due
    if item.update_time is not None:
        return _as_utc(item.update_time)
    return None


def filter_coursework(
    items: Iterable[CourseworkItem],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> list[CourseworkItem]:
    if start is None and end is None:
        return list(items)

    lower = start_of_day(start) if start is not None else None
    upper = end_of_day(end) if end is not None else None

    result: list[CourseworkItem] = []
    for item in items:
        ts = coursework_timestamp(item)
        if ts is None:
            continue
        if lower is not None and ts < lower:
            continue
        if upper is not None and ts > upper:
            continue
        result.append(item)
    return result


def format_iso_date(dt: Optional[datetime]) -> Optional[str]:
    if dt is None:
        return None
    return _as_utc(dt).date().isoformat()


def format_display_date(dt: Optional[datetime]) -> Optional[str]:
    """'Mar 1, 2024' style label."""
    if dt is None:
        return None
    dt = _as_utc(dt)
    return f"{dt:%b} {dt.day}, {dt.year}"
