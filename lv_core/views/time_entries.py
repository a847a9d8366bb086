"""Time-entry list view: rows grouped per day and project."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional, Sequence

from lv_core.columns import ColumnDescriptor, ColumnSet, field_value
from lv_core.grouping import GroupEntry

PLACEHOLDER = "—"
UNTITLED_TASK = "Untitled task"
ACTIVE_PROJECT = "Active project"


@dataclass
class TimeEntry:
    id: Optional[str] = None
    entry_date: Optional[str] = None
    entry_time: Optional[str] = None
    start_time: Optional[str] = None
    end_time: Optional[str] = None
    duration_minutes: Optional[float] = None
    duration_hours: Optional[float] = None
    task_name: Optional[str] = None
    description: Optional[str] = None
    client_name: Optional[str] = None
    project_id: Optional[str] = None
    project_name: Optional[str] = None
    billable: bool = False


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not value:
        return None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        return None


def _now_like(reference: datetime) -> datetime:
    if reference.tzinfo is None:
        return datetime.now()
    return datetime.now(timezone.utc)


def _number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return None if number != number else number


def elapsed_minutes(entry: Any, now: Optional[datetime] = None) -> Optional[int]:
    """Minutes between start and end; running timers count up to ``now``."""
    start = _parse_timestamp(field_value(entry, "start_time"))
    if start is None:
        return None
    end = _parse_timestamp(field_value(entry, "end_time")) or now or _now_like(start)
    try:
        seconds = (end - start).total_seconds()
    except TypeError:
        return None
    return max(0, round(seconds / 60))


def duration_hours(entry: Any, now: Optional[datetime] = None) -> float:
    """Hours worked: stored hours, else stored minutes, else the timestamps."""
    hours = _number(field_value(entry, "duration_hours"))
    if hours:
        return hours
    minutes = _number(field_value(entry, "duration_minutes"))
    if minutes:
        return minutes / 60
    start = _parse_timestamp(field_value(entry, "start_time"))
    if start is not None:
        end = _parse_timestamp(field_value(entry, "end_time")) or now or _now_like(start)
        try:
            return (end - start).total_seconds() / 3600
        except TypeError:
            return 0.0
    return 0.0


def total_hours(entries: Sequence[Any], now: Optional[datetime] = None) -> float:
    return sum(duration_hours(entry, now) for entry in entries)


def humanize_minutes(minutes_total: Any) -> str:
    """150 -> "2h 30m", 45 -> "45m", 120 -> "2h", anything non-positive -> "0m"."""
    minutes_value = _number(minutes_total)
    if minutes_value is None or minutes_value <= 0:
        return "0m"
    whole = int(minutes_value)
    hours, minutes = divmod(whole, 60)
    parts = []
    if hours:
        parts.append(f"{hours}h")
    if minutes:
        parts.append(f"{minutes}m")
    return " ".join(parts) or "0m"


def format_duration(entry: Any, now: Optional[datetime] = None) -> str:
    minutes = _number(field_value(entry, "duration_minutes"))
    if minutes is not None:
        return humanize_minutes(minutes)
    elapsed = elapsed_minutes(entry, now)
    if elapsed is not None:
        return humanize_minutes(elapsed)
    return PLACEHOLDER


def format_time_range(start_time: Any, end_time: Any) -> str:
    start = _parse_timestamp(start_time)
    if start is None:
        return PLACEHOLDER
    start_text = start.strftime("%H:%M")
    if not end_time:
        return f"{start_text} - ..."
    end = _parse_timestamp(end_time)
    if end is None:
        return start_text
    return f"{start_text} - {end.strftime('%H:%M')}"


def entry_day(entry: Any) -> str:
    entry_date = field_value(entry, "entry_date")
    if entry_date:
        return str(entry_date)
    start = _parse_timestamp(field_value(entry, "start_time"))
    if start is not None:
        return start.date().isoformat()
    return "unknown"


def group_key(entry: Any) -> str:
    project_id = field_value(entry, "project_id") or "unknown"
    return f"{entry_day(entry)}-{project_id}"


def newest_group_first(a: GroupEntry, b: GroupEntry) -> int:
    if a[0] == b[0]:
        return 0
    return -1 if a[0] > b[0] else 1


def _first(items: Sequence[Any], name: str) -> Any:
    return field_value(items[0], name) if items else None


def _render_duration(entry: Any) -> str:
    hours = _number(field_value(entry, "duration_hours"))
    if hours:
        return f"{hours:.2f}h"
    return format_duration(entry)


def group_header(key: str, items: Sequence[Any], is_expanded: bool, toggle: Any) -> str:
    del toggle
    first = items[0] if items else {}
    client = field_value(first, "client_name") or PLACEHOLDER
    project = field_value(first, "project_name") or ACTIVE_PROJECT
    noun = "entry" if len(items) == 1 else "entries"
    marker = "v" if is_expanded else ">"
    return (
        f"{marker} {entry_day(first)} | {client} | {project} | "
        f"{total_hours(items):.2f}h | {len(items)} {noun}"
    )


def build_columns() -> ColumnSet[TimeEntry]:
    return ColumnSet(
        [
            ColumnDescriptor(
                key="date",
                header="Date",
                accessor="entry_date",
                render=lambda e: field_value(e, "entry_time")
                or format_time_range(field_value(e, "start_time"), field_value(e, "end_time")),
                sortable=True,
                group_sort_value=lambda _, items: _first(items, "entry_date")
                or _first(items, "start_time")
                or "",
            ),
            ColumnDescriptor(
                key="client",
                header="Client",
                accessor="client_name",
                render=lambda e: field_value(e, "client_name") or PLACEHOLDER,
                sortable=True,
                group_sort_value=lambda _, items: _first(items, "client_name") or "",
            ),
            ColumnDescriptor(
                key="project",
                header="Project",
                accessor="task_name",
                render=lambda e: field_value(e, "task_name") or UNTITLED_TASK,
                sortable=True,
                sort_value=lambda e: field_value(e, "task_name") or UNTITLED_TASK,
                group_sort_value=lambda _, items: _first(items, "task_name") or UNTITLED_TASK,
            ),
            ColumnDescriptor(
                key="duration",
                header="Duration",
                accessor="duration_hours",
                render=_render_duration,
                sortable=True,
                sort_value=duration_hours,
                group_sort_value=lambda _, items: total_hours(items),
                align="right",
            ),
        ],
        row_type=TimeEntry,
    )
