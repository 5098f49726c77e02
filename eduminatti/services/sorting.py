"""Result ordering for the school listing.

Listings are ordered descending by default (best rated, most reviewed,
newest, Z to A, most expensive first); ``asc`` reverses that.  Python's sort
is stable, so schools with equal keys keep their filtered order in both
directions and sorting an already sorted list leaves it unchanged.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable, Iterable

from eduminatti.db.models import School
from eduminatti.services.fees import average_fee

logger = logging.getLogger(__name__)


class SortKey(str, enum.Enum):
    """Fields a listing can be sorted by."""

    RATING = "rating"
    NAME = "name"
    REVIEWS = "reviews"
    ESTABLISHED = "established"
    FEE_RANGE = "feeRange"

    @classmethod
    def parse(cls, value: str) -> SortKey:
        """Return the key named *value*, falling back to :attr:`RATING`."""
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unknown sort key %r – sorting by rating", value)
            return cls.RATING


class SortOrder(str, enum.Enum):
    ASC = "asc"
    DESC = "desc"

    def toggled(self) -> SortOrder:
        return SortOrder.ASC if self is SortOrder.DESC else SortOrder.DESC


DEFAULT_SORT_KEY = SortKey.RATING
DEFAULT_SORT_ORDER = SortOrder.DESC


_SORT_VALUES: dict[SortKey, Callable[[School], float | int | str]] = {
    SortKey.RATING: lambda school: school.rating,
    SortKey.NAME: lambda school: school.name.casefold(),
    SortKey.REVIEWS: lambda school: school.reviews,
    SortKey.ESTABLISHED: lambda school: school.established,
    SortKey.FEE_RANGE: lambda school: average_fee(school.fee_range),  # unparseable sorts as 0
}


def sort_key_function(key: SortKey) -> Callable[[School], float | int | str]:
    """Return the function extracting the comparison value for *key*."""
    return _SORT_VALUES[key]


def sort_schools(
    schools: Iterable[School],
    key: SortKey = DEFAULT_SORT_KEY,
    order: SortOrder = DEFAULT_SORT_ORDER,
) -> list[School]:
    """Return a new list of *schools* ordered by *key* in *order*.

    Equal keys keep their input order.  The input is not modified.
    """
    return sorted(schools, key=sort_key_function(key), reverse=order is SortOrder.DESC)
