"""Query evaluation and result filtering for the school directory.

A :class:`SchoolQuery` combines the free-text search box, the location
picker and the five sidebar filters.  :func:`matches` decides whether one
school satisfies a query; :func:`filter_schools` applies it over the whole
data set.

The filter types handled are:
  * free text (name or location, case-insensitive substring)
  * location (exact, case-sensitive)
  * fee band (on the mean of the school's fee range)
  * school type
  * gender policy
  * curriculum
  * minimum rating

Every sub-match is true when its constraint is empty, and the overall match
is the logical AND of all of them.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field, fields, replace

from eduminatti.db.models import Curriculum, FeeBand, Gender, School, SchoolType
from eduminatti.services.fees import fee_band

# Keys of the filter mapping sent by the directory front end.
FILTER_KEYS: tuple[str, ...] = ("feeRange", "schoolType", "gender", "curriculum", "rating")


class InvalidFiltersError(ValueError):
    """Raised when a filter mapping does not have the fixed five-key shape."""


# ---------------------------------------------------------------------------
# Query objects
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SchoolFilters:
    """The five sidebar filters.  ``None`` means the filter is not applied.

    ``rating`` is kept as the threshold token chosen in the UI (``"4"``,
    ``"3"``); it is parsed when the filter is evaluated.
    """

    fee_range: FeeBand | None = None
    school_type: SchoolType | None = None
    gender: Gender | None = None
    curriculum: Curriculum | None = None
    rating: str | None = None

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> SchoolFilters:
        """Build filters from the front end's ``{feeRange: "", ...}`` shape.

        Empty strings mean "no constraint".

        Raises:
            InvalidFiltersError: If keys are missing or unexpected, or a
                category value is not one of the known labels.
        """
        keys = set(mapping)
        missing = [key for key in FILTER_KEYS if key not in keys]
        extra = sorted(keys.difference(FILTER_KEYS))
        if missing or extra:
            raise InvalidFiltersError(
                f"Filter keys must be exactly {list(FILTER_KEYS)}; missing={missing} extra={extra}"
            )

        def _category(enum_cls, key):
            value = mapping[key]
            if value == "":
                return None
            try:
                return enum_cls(value)
            except ValueError:
                raise InvalidFiltersError(f"Unknown {key} value: {value!r}") from None

        return cls(
            fee_range=_category(FeeBand, "feeRange"),
            school_type=_category(SchoolType, "schoolType"),
            gender=_category(Gender, "gender"),
            curriculum=_category(Curriculum, "curriculum"),
            rating=mapping["rating"] or None,
        )

    def to_mapping(self) -> dict[str, str]:
        """Return the front end's five-key shape, with ``""`` for unset filters."""
        return {
            "feeRange": self.fee_range.value if self.fee_range else "",
            "schoolType": self.school_type.value if self.school_type else "",
            "gender": self.gender.value if self.gender else "",
            "curriculum": self.curriculum.value if self.curriculum else "",
            "rating": self.rating or "",
        }

    def is_active(self) -> bool:
        """Return True if at least one filter constrains the results.

        A rating token that does not parse as a number is not a constraint.
        """
        if parse_rating_threshold(self.rating) is not None:
            return True
        return any(getattr(self, f.name) is not None for f in fields(self) if f.name != "rating")

    def with_value(self, name: str, value) -> SchoolFilters:
        """Return a copy with the filter *name* set to *value* (``None`` clears it)."""
        return replace(self, **{name: value})


@dataclass(frozen=True)
class SchoolQuery:
    """Free text, selected location and sidebar filters.  Empty text/location match everything."""

    text: str = ""
    location: str = ""
    filters: SchoolFilters = field(default_factory=SchoolFilters)


# ---------------------------------------------------------------------------
# Sub-matches
# ---------------------------------------------------------------------------


def matches_text(school: School, text: str) -> bool:
    if text == "":
        return True
    needle = text.lower()
    return needle in school.name.lower() or needle in school.location.lower()


def matches_location(school: School, location: str) -> bool:
    # Exact match on purpose: the picker offers the stored labels verbatim.
    return location == "" or school.location == location


def matches_fee_range(school: School, band: FeeBand | None) -> bool:
    """Unparseable fee text never matches an active fee filter."""
    if band is None:
        return True
    return fee_band(school.fee_range) == band


def matches_category(actual: str, expected: str | None) -> bool:
    return expected is None or actual == expected


def parse_rating_threshold(token: str | None) -> float | None:
    """Return the minimum rating encoded by *token*, or ``None`` for no constraint.

    Tokens that are not finite numbers (``"abc"``, ``"nan"``) are treated as
    no constraint.
    """
    if token is None:
        return None
    try:
        threshold = float(token)
    except ValueError:
        return None
    if not math.isfinite(threshold):
        return None
    return threshold


def matches_rating(school: School, token: str | None) -> bool:
    threshold = parse_rating_threshold(token)
    return threshold is None or school.rating >= threshold


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def matches(school: School, query: SchoolQuery) -> bool:
    """Return True if *school* satisfies every part of *query*."""
    filters = query.filters
    return (
        matches_text(school, query.text)
        and matches_location(school, query.location)
        and matches_fee_range(school, filters.fee_range)
        and matches_category(school.type, filters.school_type)
        and matches_category(school.gender, filters.gender)
        and matches_category(school.curriculum, filters.curriculum)
        and matches_rating(school, filters.rating)
    )


def filter_by_query(schools: Iterable[School], query: SchoolQuery) -> list[School]:
    """Return the schools matching *query*, in their original relative order."""
    return [school for school in schools if matches(school, query)]


def filter_schools(
    schools: Iterable[School],
    text: str,
    location: str,
    filters: SchoolFilters,
) -> list[School]:
    """Filter *schools* by search text, selected location and sidebar filters.

    The input is not modified; an empty list is returned when nothing matches.
    """
    return filter_by_query(schools, SchoolQuery(text=text, location=location, filters=filters))
