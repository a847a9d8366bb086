"""Tests for the invoice and tax prepayment views."""

from __future__ import annotations

import pytest

from lv_core.orchestrator import TableView
from lv_core.sorting import SortDirection, SortState
from lv_core.views import get_view
from lv_core.views import finances
from lv_core.views.finances import Invoice, TaxPrepayment

pytestmark = pytest.mark.unit_core

PREPAYMENTS = [
    TaxPrepayment(id="a", tax_type="vat", amount=300.0, status="paid", quarter=1),
    TaxPrepayment(id="b", tax_type="income_tax", amount=120.0, status="refund"),
    TaxPrepayment(id="c", tax_type="vat", amount=50.0, status="planned", receipt_filename="r.pdf"),
]


def _ids(rows):
    return [row.id for row in rows]


def test_refunds_sort_as_money_in() -> None:
    view = TableView(
        PREPAYMENTS,
        finances.build_tax_prepayment_columns(),
        default_sort=SortState("amount", SortDirection.DESC),
    )

    assert _ids(view.render().rows) == ["b", "c", "a"]


def test_prepayment_cells() -> None:
    render = TableView(PREPAYMENTS, finances.build_tax_prepayment_columns()).render()

    assert render.cells(PREPAYMENTS[0]) == ["VAT", "-$300.00", "—", "-", "Q1", "paid", "—"]
    assert render.cells(PREPAYMENTS[1])[:2] == ["Income tax", "$120.00"]
    assert render.cells(PREPAYMENTS[2])[-1] == "attached"


def test_invoice_updated_falls_back_to_issue_date() -> None:
    invoices = [
        Invoice(id="1", invoice_number="INV-1", issue_date="2024-03-01"),
        Invoice(id="2", invoice_number="INV-2", issue_date="2024-01-01", updated_at="2024-05-02T10:00:00"),
        Invoice(id="3", invoice_number="INV-3"),
    ]
    view = TableView(invoices, finances.build_invoice_columns(), default_sort=SortState("updated_at"))

    render = view.render()

    assert _ids(render.rows) == ["1", "2", "3"]
    assert render.cells(invoices[1])[-1] == "2024-05-02"
    assert render.cells(invoices[2])[1] == "—"


def test_format_currency() -> None:
    assert finances.format_currency(1234.5) == "$1,234.50"
    assert finances.format_currency(-2) == "-$2.00"
    assert finances.format_currency(None) == "—"


def test_finance_views_carry_their_empty_messages() -> None:
    definition = get_view("tax-prepayments")
    view = TableView(
        [],
        definition.build_columns([]),
        page_size=definition.page_size,
        empty_message=definition.empty_message,
    )

    assert view.render().empty_message == "No tax prepayments recorded"
