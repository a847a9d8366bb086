"""Page slicing and pager controls.

Two modes exist. In controlled mode the caller passes `PaginationProps`, has
already fetched only the current page, and owns the page number; the engine
only describes the pager. In uncontrolled mode the view keeps a `PageState`
and slices the processed collection (rows, or groups when grouping is on)
with `paginate`.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Generic, List, Optional, Sequence, TypeVar, Union

logger = logging.getLogger(__name__)

T = TypeVar("T")

ELLIPSIS = "..."
PageButton = Union[int, str]


@dataclass
class PaginationProps:
    """Externally owned pagination (controlled mode)."""

    current_page: int
    total_pages: int
    on_page_change: Callable[[int], None]
    total_items: Optional[int] = None
    page_size: Optional[int] = None
    on_page_size_change: Optional[Callable[[int], None]] = None


@dataclass
class PageState:
    """Internally owned pagination (uncontrolled mode).

    A `page_size` of None disables slicing entirely.
    """

    current_page: int = 1
    page_size: Optional[int] = None

    @property
    def enabled(self) -> bool:
        return self.page_size is not None

    def resize(self, page_size: Optional[int]) -> None:
        self.page_size = page_size
        self.current_page = 1


@dataclass
class Page(Generic[T]):
    items: List[T]
    current_page: int
    total_pages: int
    total_items: int
    page_size: Optional[int]


def total_pages_for(total_items: int, page_size: Optional[int]) -> int:
    if not page_size or total_items <= 0:
        return 1
    return max(1, math.ceil(total_items / page_size))


def clamp_page(page: int, total_pages: int) -> int:
    return min(max(1, page), max(1, total_pages))


def paginate(items: Sequence[T], page: int, page_size: Optional[int]) -> Page[T]:
    """Slice one page out of ``items``; out-of-range pages are clamped."""
    total_items = len(items)
    if page_size is None:
        return Page(list(items), 1, 1, total_items, None)
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")
    total_pages = total_pages_for(total_items, page_size)
    current = clamp_page(page, total_pages)
    if current != page:
        logger.debug("Clamped page %d to %d of %d", page, current, total_pages)
    start = (current - 1) * page_size
    return Page(list(items[start : start + page_size]), current, total_pages, total_items, page_size)


def page_window(current_page: int, total_pages: int, neighbors: int = 1) -> List[PageButton]:
    """Pager buttons: first, last, and the current page with its neighbours.

    Pages just outside the neighbourhood collapse to a single ``ELLIPSIS``
    marker on each side.
    """
    window: List[PageButton] = []
    for page in range(1, total_pages + 1):
        if page in (1, total_pages) or abs(page - current_page) <= neighbors:
            window.append(page)
        elif abs(page - current_page) == neighbors + 1:
            window.append(ELLIPSIS)
    return window


@dataclass
class PaginationControls:
    """Render-ready description of the pager under a table."""

    current_page: int
    total_pages: int
    total_items: Optional[int]
    page_size: Optional[int]
    controlled: bool
    page_size_options: List[int] = field(default_factory=list)
    window: List[PageButton] = field(default_factory=list)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def visible(self) -> bool:
        if self.controlled:
            return True
        return self.page_size is not None and self.total_pages > 1

    @property
    def summary(self) -> str:
        text = f"Page {self.current_page} of {self.total_pages}"
        if self.total_items:
            text += f" ({self.total_items} entries)"
        return text
