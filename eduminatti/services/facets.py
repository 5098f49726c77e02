"""Facet helpers for the filter sidebar and listing header."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable

from eduminatti.db.models import FeeBand, School
from eduminatti.services.filters import SchoolFilters, parse_rating_threshold
from eduminatti.services.sorting import SortKey

FEE_BAND_LABELS: dict[FeeBand, str] = {
    FeeBand.LOW: "Under ₹3L",
    FeeBand.MEDIUM: "₹3L - ₹5L",
    FeeBand.HIGH: "Above ₹5L",
}

SORT_DISPLAY_NAMES: dict[SortKey, str] = {
    SortKey.RATING: "Rating",
    SortKey.NAME: "Name",
    SortKey.REVIEWS: "Reviews",
    SortKey.ESTABLISHED: "Established",
    SortKey.FEE_RANGE: "Fee Range",
}


def _field_value(school: School, field: str):
    value = getattr(school, field)
    # Enums are reported by their label.
    return getattr(value, "value", value)


def unique_values(schools: Iterable[School], field: str) -> list:
    """Return the sorted distinct values of *field* across *schools*."""
    return sorted({_field_value(school, field) for school in schools})


def facet_counts(schools: Iterable[School], field: str) -> dict:
    """Return how many schools have each value of *field*."""
    return dict(Counter(_field_value(school, field) for school in schools))


def active_filter_labels(filters: SchoolFilters) -> dict[str, str]:
    """Return display text for each active filter, keyed by filter name."""
    labels: dict[str, str] = {}
    if filters.fee_range is not None:
        labels["fee_range"] = FEE_BAND_LABELS[filters.fee_range]
    if filters.school_type is not None:
        labels["school_type"] = filters.school_type.value
    if filters.gender is not None:
        labels["gender"] = filters.gender.value
    if filters.curriculum is not None:
        labels["curriculum"] = filters.curriculum.value
    if parse_rating_threshold(filters.rating) is not None:
        labels["rating"] = f"{filters.rating}+ Stars"
    return labels


def sort_display_name(key: SortKey | str) -> str:
    """Return the label shown in the "Sort by" picker for *key*."""
    try:
        return SORT_DISPLAY_NAMES[SortKey(key)]
    except ValueError:
        return str(key)
