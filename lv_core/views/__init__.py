"""Prebuilt column sets for the business list views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence

from lv_core.columns import ColumnDescriptor, ColumnSet
from lv_core.grouping import GroupBy, GroupComparator
from lv_core.views import clients, finances, time_entries


@dataclass(frozen=True)
class ViewDefinition:
    """Everything a `TableView` needs besides rows and interaction state."""

    name: str
    title: str
    description: str
    build_columns: Callable[[Sequence[Any]], ColumnSet]
    group_by: Optional[GroupBy] = None
    group_sort: Optional[GroupComparator] = None
    group_header_render: Optional[Callable[..., Any]] = None
    page_size: Optional[int] = None
    empty_message: Optional[str] = None


def infer_columns(rows: Sequence[Any]) -> ColumnSet:
    """One sortable column per field name, in first-seen order."""
    keys: Dict[str, None] = {}
    for row in rows:
        if isinstance(row, Mapping):
            names = row.keys()
        else:
            names = getattr(row, "__dict__", {}).keys()
        for name in names:
            keys.setdefault(str(name), None)
    return ColumnSet(
        [ColumnDescriptor(key=key, header=key, accessor=key, sortable=True) for key in keys]
    )


VIEWS: Dict[str, ViewDefinition] = {
    "generic": ViewDefinition(
        name="generic",
        title="Rows",
        description="One sortable column per field found in the rows",
        build_columns=infer_columns,
    ),
    "time-entries": ViewDefinition(
        name="time-entries",
        title="Time Entries",
        description="Time entries grouped per day and project, newest first",
        build_columns=lambda rows: time_entries.build_columns(),
        group_by=time_entries.group_key,
        group_sort=time_entries.newest_group_first,
        group_header_render=time_entries.group_header,
        page_size=10,
    ),
    "clients": ViewDefinition(
        name="clients",
        title="Clients",
        description="Client list with contact and status",
        build_columns=lambda rows: clients.build_client_columns(),
        page_size=10,
    ),
    "projects": ViewDefinition(
        name="projects",
        title="Projects",
        description="Projects with budget and tracked hours",
        build_columns=lambda rows: clients.build_project_columns(),
        page_size=10,
    ),
    "invoices": ViewDefinition(
        name="invoices",
        title="Recent Invoices",
        description="Invoices with due date, amount and status",
        build_columns=lambda rows: finances.build_invoice_columns(),
        page_size=10,
        empty_message="No invoices yet",
    ),
    "tax-prepayments": ViewDefinition(
        name="tax-prepayments",
        title="Tax Prepayments",
        description="VAT and income tax prepayments; refunds sort as money in",
        build_columns=lambda rows: finances.build_tax_prepayment_columns(),
        page_size=10,
        empty_message="No tax prepayments recorded",
    ),
}


def get_view(name: str) -> ViewDefinition:
    try:
        return VIEWS[name]
    except KeyError:
        raise KeyError(f"Unknown view '{name}'. Available: {', '.join(sorted(VIEWS))}") from None


def view_names() -> List[str]:
    return sorted(VIEWS)


__all__ = ["VIEWS", "ViewDefinition", "get_view", "infer_columns", "view_names"]
