"""Invoice and tax prepayment list views."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from lv_core.columns import ColumnDescriptor, ColumnSet, field_value

PLACEHOLDER = "—"

TAX_TYPE_LABELS = {"vat": "VAT", "income_tax": "Income tax"}


@dataclass
class Invoice:
    id: Optional[str] = None
    invoice_number: Optional[str] = None
    client_name: Optional[str] = None
    issue_date: Optional[str] = None
    due_date: Optional[str] = None
    total_amount: Optional[float] = None
    status: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass
class TaxPrepayment:
    id: Optional[str] = None
    tax_type: Optional[str] = None
    amount: Optional[float] = None
    payment_date: Optional[str] = None
    period_start: Optional[str] = None
    period_end: Optional[str] = None
    quarter: Optional[int] = None
    status: Optional[str] = None
    receipt_filename: Optional[str] = None


def format_currency(value: Any) -> str:
    if value is None:
        return PLACEHOLDER
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return str(value)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def _date(value: Any) -> str:
    return str(value)[:10] if value else PLACEHOLDER


def last_activity(invoice: Any) -> Optional[str]:
    """Last update timestamp, falling back to the issue date."""
    return field_value(invoice, "updated_at") or field_value(invoice, "issue_date")


def signed_amount(prepayment: Any) -> Optional[float]:
    """Refunds count as money in, every other status as money out."""
    amount = field_value(prepayment, "amount")
    if amount is None:
        return None
    value = float(amount)
    return value if field_value(prepayment, "status") == "refund" else -value


def _period(prepayment: Any) -> str:
    start = field_value(prepayment, "period_start")
    end = field_value(prepayment, "period_end")
    if not (start and end):
        return "-"
    return f"{_date(start)} - {_date(end)}"


def _quarter(prepayment: Any) -> str:
    quarter = field_value(prepayment, "quarter")
    return f"Q{quarter}" if quarter else "-"


def build_invoice_columns() -> ColumnSet[Invoice]:
    return ColumnSet(
        [
            ColumnDescriptor(
                key="invoice_number", header="Invoice #", accessor="invoice_number", sortable=True
            ),
            ColumnDescriptor(
                key="client_name",
                header="Client",
                accessor="client_name",
                render=lambda i: field_value(i, "client_name") or PLACEHOLDER,
                sortable=True,
            ),
            ColumnDescriptor(
                key="due_date",
                header="Due",
                accessor="due_date",
                render=lambda i: _date(field_value(i, "due_date")),
                sortable=True,
            ),
            ColumnDescriptor(
                key="total_amount",
                header="Amount",
                accessor="total_amount",
                render=lambda i: format_currency(field_value(i, "total_amount")),
                sortable=True,
                align="right",
            ),
            ColumnDescriptor(key="status", header="Status", accessor="status", sortable=True),
            ColumnDescriptor(
                key="updated_at",
                header="Updated",
                render=lambda i: _date(last_activity(i)),
                sortable=True,
                sort_value=last_activity,
            ),
        ],
        row_type=Invoice,
    )


def build_tax_prepayment_columns() -> ColumnSet[TaxPrepayment]:
    return ColumnSet(
        [
            ColumnDescriptor(
                key="taxType",
                header="Tax",
                accessor="tax_type",
                render=lambda p: TAX_TYPE_LABELS.get(field_value(p, "tax_type"), PLACEHOLDER),
                sortable=True,
            ),
            ColumnDescriptor(
                key="amount",
                header="Amount",
                accessor="amount",
                render=lambda p: format_currency(signed_amount(p)),
                sortable=True,
                sort_value=signed_amount,
                align="right",
            ),
            ColumnDescriptor(
                key="paymentDate",
                header="Paid on",
                accessor="payment_date",
                render=lambda p: _date(field_value(p, "payment_date")),
                sortable=True,
            ),
            ColumnDescriptor(
                key="period", header="Period", accessor="period_start", render=_period, sortable=True
            ),
            ColumnDescriptor(
                key="quarter", header="Quarter", accessor="quarter", render=_quarter, sortable=True
            ),
            ColumnDescriptor(key="status", header="Status", accessor="status", sortable=True),
            ColumnDescriptor(
                key="receipt",
                header="Receipt",
                render=lambda p: "attached" if field_value(p, "receipt_filename") else PLACEHOLDER,
            ),
        ],
        row_type=TaxPrepayment,
    )
