"""Tests for page slicing and pager controls."""

from __future__ import annotations

import pytest

from lv_core.pagination import (
    ELLIPSIS,
    PageState,
    PaginationControls,
    clamp_page,
    page_window,
    paginate,
    total_pages_for,
)

pytestmark = pytest.mark.unit_core


def test_total_pages_rounds_up_with_minimum_one() -> None:
    assert total_pages_for(5, 2) == 3
    assert total_pages_for(4, 2) == 2
    assert total_pages_for(0, 2) == 1
    assert total_pages_for(5, None) == 1


def test_out_of_range_page_is_clamped() -> None:
    page = paginate(list(range(5)), 5, 2)

    assert page.current_page == 3
    assert page.total_pages == 3
    assert page.items == [4]


def test_page_below_one_is_clamped() -> None:
    assert paginate(list(range(5)), 0, 2).current_page == 1
    assert clamp_page(-3, 4) == 1


def test_concatenated_pages_reconstruct_input() -> None:
    items = list(range(23))
    total = total_pages_for(len(items), 5)

    collected = []
    for number in range(1, total + 1):
        collected.extend(paginate(items, number, 5).items)

    assert collected == items


def test_disabled_pagination_returns_everything() -> None:
    page = paginate(list(range(30)), 4, None)

    assert page.items == list(range(30))
    assert page.current_page == 1
    assert page.total_pages == 1


def test_empty_collection_has_single_empty_page() -> None:
    page = paginate([], 3, 10)

    assert page.items == []
    assert page.current_page == 1
    assert page.total_items == 0


def test_non_positive_page_size_rejected() -> None:
    with pytest.raises(ValueError):
        paginate([1, 2], 1, 0)


@pytest.mark.parametrize("previous_page", [1, 2, 7])
def test_resize_resets_to_first_page(previous_page) -> None:
    state = PageState(current_page=previous_page, page_size=10)

    state.resize(25)

    assert state.current_page == 1
    assert state.page_size == 25


def test_page_window_collapses_distant_pages() -> None:
    assert page_window(5, 10) == [1, ELLIPSIS, 4, 5, 6, ELLIPSIS, 10]
    assert page_window(1, 10) == [1, 2, ELLIPSIS, 10]
    assert page_window(2, 3) == [1, 2, 3]
    assert page_window(1, 1) == [1]


def test_page_window_neighbors_widen_the_window() -> None:
    assert page_window(5, 10, neighbors=2) == [1, ELLIPSIS, 3, 4, 5, 6, 7, ELLIPSIS, 10]


def test_controls_visibility_and_summary() -> None:
    controls = PaginationControls(
        current_page=1, total_pages=3, total_items=25, page_size=10, controlled=False
    )
    assert controls.visible
    assert not controls.has_previous
    assert controls.has_next
    assert controls.summary == "Page 1 of 3 (25 entries)"

    single = PaginationControls(
        current_page=1, total_pages=1, total_items=4, page_size=10, controlled=False
    )
    assert not single.visible

    controlled = PaginationControls(
        current_page=1, total_pages=1, total_items=None, page_size=None, controlled=True
    )
    assert controlled.visible
    assert controlled.summary == "Page 1 of 1"
