"""Page slicing and page-number window computation for listings."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

PAGE_SIZE = 12
MAX_VISIBLE_PAGES = 5


@dataclass(frozen=True)
class Page(Generic[T]):
    """One page of a sorted result set plus the metadata needed to render it."""

    items: list[T]
    page: int
    page_size: int
    total_count: int
    total_pages: int
    start_index: int
    end_index: int

    @property
    def display_start(self) -> int:
        """1-based position of the first item shown, or 0 for an empty page."""
        return self.start_index + 1 if self.items else 0

    @property
    def display_end(self) -> int:
        """1-based position of the last item shown."""
        return self.end_index

    @property
    def has_previous(self) -> bool:
        return self.page > 1

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages


@dataclass(frozen=True)
class PageWindow:
    """Page-number controls to show around the current page.

    ``pages`` holds at most ``max_visible`` consecutive numbers.  When the
    first (last) page is not among them a shortcut is shown, with an ellipsis
    if there is also a gap between the shortcut and the window.
    """

    current_page: int
    total_pages: int
    pages: list[int] = field(default_factory=list)
    show_first: bool = False
    leading_ellipsis: bool = False
    show_last: bool = False
    trailing_ellipsis: bool = False


def total_pages_for(count: int, page_size: int = PAGE_SIZE) -> int:
    """Return the number of pages for *count* items; at least 1."""
    if page_size < 1:
        raise ValueError(f"page_size must be >= 1, got {page_size}")
    return max(1, math.ceil(count / page_size))


def paginate(items: Sequence[T], page_size: int = PAGE_SIZE, page: int = 1) -> Page[T]:
    """Slice *items* into the requested 1-based *page*.

    ``start_index`` is ``(page - 1) * page_size`` for every page within range.
    For a page past the end both indices are clamped to the collection length
    and ``items`` is empty; callers are expected to reject such requests before
    they get here (see :meth:`eduminatti.services.browse.BrowseState.go_to_page`).

    Raises:
        ValueError: If *page* or *page_size* is less than 1.
    """
    if page < 1:
        raise ValueError(f"page must be >= 1, got {page}")
    count = len(items)
    total_pages = total_pages_for(count, page_size)
    start_index = min((page - 1) * page_size, count)
    end_index = min(start_index + page_size, count)
    return Page(
        items=list(items[start_index:end_index]),
        page=page,
        page_size=page_size,
        total_count=count,
        total_pages=total_pages,
        start_index=start_index,
        end_index=end_index,
    )


def page_window(current_page: int, total_pages: int, max_visible: int = MAX_VISIBLE_PAGES) -> PageWindow:
    """Return the page numbers to display around *current_page*.

    Shows every page when there are no more than *max_visible*; otherwise a
    run of *max_visible* pages centred on the current one, shifted left when
    it would run past the last page.
    """
    if total_pages <= max_visible:
        start, end = 1, total_pages
    else:
        start = max(1, current_page - max_visible // 2)
        end = min(total_pages, start + max_visible - 1)
        if end - start < max_visible - 1:
            start = max(1, end - max_visible + 1)

    pages = list(range(start, end + 1))
    return PageWindow(
        current_page=current_page,
        total_pages=total_pages,
        pages=pages,
        show_first=start > 1,
        leading_ellipsis=start > 2,
        show_last=end < total_pages,
        trailing_ellipsis=end < total_pages - 1,
    )
