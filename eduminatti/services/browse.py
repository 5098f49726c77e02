"""Listing state and the filter → sort → paginate pipeline.

The presentation layer owns a single :class:`BrowseState` and replaces it on
every user event using the transition methods below.  Any change to the
query or the ordering sends the user back to page 1; page changes outside
the valid range are ignored.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field, replace

from eduminatti.db.models import School
from eduminatti.services.filters import SchoolFilters, SchoolQuery, filter_by_query
from eduminatti.services.pagination import (
    MAX_VISIBLE_PAGES,
    PAGE_SIZE,
    Page,
    PageWindow,
    page_window,
    paginate,
)
from eduminatti.services.sorting import DEFAULT_SORT_KEY, DEFAULT_SORT_ORDER, SortKey, SortOrder, sort_schools

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BrowseState:
    """Everything the user has chosen on the listing page."""

    query: SchoolQuery = field(default_factory=SchoolQuery)
    sort_key: SortKey = DEFAULT_SORT_KEY
    sort_order: SortOrder = DEFAULT_SORT_ORDER
    page: int = 1

    # -- Query changes (reset to page 1) --

    def with_query(self, query: SchoolQuery) -> BrowseState:
        return replace(self, query=query, page=1)

    def with_text(self, text: str) -> BrowseState:
        return self.with_query(replace(self.query, text=text))

    def with_location(self, location: str) -> BrowseState:
        return self.with_query(replace(self.query, location=location))

    def with_filters(self, filters: SchoolFilters) -> BrowseState:
        return self.with_query(replace(self.query, filters=filters))

    def with_filter(self, name: str, value) -> BrowseState:
        """Set one sidebar filter; selecting the active value again clears it."""
        if getattr(self.query.filters, name) == value:
            value = None
        return self.with_filters(self.query.filters.with_value(name, value))

    def cleared_filters(self) -> BrowseState:
        return self.with_filters(SchoolFilters())

    # -- Ordering changes (reset to page 1) --

    def with_sort(self, key: SortKey) -> BrowseState:
        """Select *key*; choosing the current key again flips the order.

        A newly selected key always starts descending.
        """
        if key is self.sort_key:
            return replace(self, sort_order=self.sort_order.toggled(), page=1)
        return replace(self, sort_key=key, sort_order=SortOrder.DESC, page=1)

    def toggled_order(self) -> BrowseState:
        return replace(self, sort_order=self.sort_order.toggled(), page=1)

    # -- Paging --

    def go_to_page(self, page: int, total_pages: int) -> BrowseState:
        """Move to *page* if it is within ``1..total_pages``; otherwise return ``self``."""
        if not 1 <= page <= total_pages:
            logger.debug("Ignoring page change to %d (total pages %d)", page, total_pages)
            return self
        return replace(self, page=page)


@dataclass(frozen=True)
class BrowseResult:
    """A rendered listing: the current page and its page-number window."""

    state: BrowseState
    page: Page[School]
    window: PageWindow


def browse(
    schools: Sequence[School],
    state: BrowseState,
    page_size: int = PAGE_SIZE,
    max_visible_pages: int = MAX_VISIBLE_PAGES,
) -> BrowseResult:
    """Filter, sort and paginate *schools* according to *state*."""
    matched = filter_by_query(schools, state.query)
    ordered = sort_schools(matched, state.sort_key, state.sort_order)
    page = paginate(ordered, page_size, state.page)
    window = page_window(page.page, page.total_pages, max_visible_pages)
    return BrowseResult(state=state, page=page, window=window)
