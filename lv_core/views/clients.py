"""Client and project list views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from lv_core.columns import ColumnDescriptor, ColumnSet, field_value


@dataclass
class Client:
    id: Optional[str] = None
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    status: Optional[str] = None
    created_at: Optional[str] = None


@dataclass
class Project:
    id: Optional[str] = None
    name: Optional[str] = None
    client_name: Optional[str] = None
    status: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    budget: Optional[float] = None
    total_tracked_hours: Optional[float] = None


def _date_part(value: object) -> str:
    return str(value)[:10] if value else "—"


def _timeline(project: object) -> str:
    start = field_value(project, "start_date")
    end = field_value(project, "end_date")
    if not start and not end:
        return "—"
    return f"{_date_part(start)} - {_date_part(end)}"


def _money(value: object) -> str:
    if value is None:
        return "—"
    try:
        return f"{float(value):,.2f}"
    except (TypeError, ValueError):
        return str(value)


def build_client_columns() -> ColumnSet[Client]:
    return ColumnSet(
        [
            ColumnDescriptor(key="client", header="Client", accessor="name", sortable=True),
            ColumnDescriptor(
                key="contact",
                header="Contact",
                accessor="email",
                render=lambda c: field_value(c, "email") or field_value(c, "phone") or "—",
                sortable=True,
            ),
            ColumnDescriptor(key="status", header="Status", accessor="status", sortable=True),
            ColumnDescriptor(
                key="created",
                header="Created",
                accessor="created_at",
                render=lambda c: _date_part(field_value(c, "created_at")),
                sortable=True,
            ),
        ],
        row_type=Client,
    )


def build_project_columns() -> ColumnSet[Project]:
    return ColumnSet(
        [
            ColumnDescriptor(key="project", header="Project", accessor="name", sortable=True),
            ColumnDescriptor(key="client", header="Client", accessor="client_name", sortable=True),
            ColumnDescriptor(key="status", header="Status", accessor="status", sortable=True),
            ColumnDescriptor(
                key="timeline",
                header="Timeline",
                accessor="start_date",
                render=_timeline,
                sortable=True,
            ),
            ColumnDescriptor(
                key="budget",
                header="Budget",
                accessor="budget",
                render=lambda p: _money(field_value(p, "budget")),
                sortable=True,
                align="right",
            ),
            ColumnDescriptor(
                key="trackedHours",
                header="Tracked",
                accessor="total_tracked_hours",
                render=lambda p: f"{float(field_value(p, 'total_tracked_hours') or 0):.2f}h",
                sortable=True,
                align="right",
            ),
        ],
        row_type=Project,
    )
