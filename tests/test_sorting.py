"""Tests for listing sort order."""

from __future__ import annotations

import pytest

from eduminatti.services.sorting import SortKey, SortOrder, sort_schools
from tests.seed_test_data import make_school


def _ids(schools) -> list[int]:
    return [s.id for s in schools]


class TestSortKeys:
    def test_default_is_rating_descending(self, schools):
        ordered = sort_schools(schools)
        ratings = [s.rating for s in ordered]
        assert ratings == sorted(ratings, reverse=True)
        assert ordered[0].name == "The Doon School"

    def test_rating_ascending(self, schools):
        ordered = sort_schools(schools, SortKey.RATING, SortOrder.ASC)
        assert ordered[0].name == "Kimmins High School"
        assert ordered[-1].name == "The Doon School"

    def test_name_is_case_insensitive(self):
        schools = [
            make_school(id=1, name="banyan school"),
            make_school(id=2, name="Aravali School"),
            make_school(id=3, name="Cedar School"),
        ]
        assert _ids(sort_schools(schools, SortKey.NAME, SortOrder.ASC)) == [2, 1, 3]
        assert _ids(sort_schools(schools, SortKey.NAME, SortOrder.DESC)) == [3, 1, 2]

    def test_reviews_descending(self, schools):
        reviews = [s.reviews for s in sort_schools(schools, SortKey.REVIEWS)]
        assert reviews == sorted(reviews, reverse=True)

    def test_established_ascending(self, schools):
        ordered = sort_schools(schools, SortKey.ESTABLISHED, SortOrder.ASC)
        assert ordered[0].name == "Bishop Cotton School"  # 1859

    def test_fee_range_sorts_by_mean_fee(self):
        schools = [
            make_school(id=1, fee_range="₹4,00,000 - ₹6,00,000"),
            make_school(id=2, fee_range="₹10,00,000 - ₹12,00,000"),
            make_school(id=3, fee_range="Fees on request"),
            make_school(id=4, fee_range="₹1,00,000 - ₹1,50,000"),
        ]
        assert _ids(sort_schools(schools, SortKey.FEE_RANGE, SortOrder.DESC)) == [2, 1, 4, 3]
        assert _ids(sort_schools(schools, SortKey.FEE_RANGE, SortOrder.ASC)) == [3, 4, 1, 2]


class TestSortKeyParse:
    def test_known_key(self):
        assert SortKey.parse("feeRange") is SortKey.FEE_RANGE

    def test_unknown_key_falls_back_to_rating(self):
        assert SortKey.parse("distance") is SortKey.RATING


class TestSortProperties:
    """Sorting is a stable total order."""

    @pytest.mark.parametrize("key", list(SortKey))
    @pytest.mark.parametrize("order", list(SortOrder))
    def test_idempotent(self, schools, key, order):
        once = sort_schools(schools, key, order)
        assert sort_schools(once, key, order) == once

    @pytest.mark.parametrize("order", list(SortOrder))
    def test_ties_keep_input_order(self, order):
        schools = [make_school(id=i, rating=4.0) for i in range(1, 6)]
        assert _ids(sort_schools(schools, SortKey.RATING, order)) == [1, 2, 3, 4, 5]

    def test_does_not_mutate_input(self, schools):
        before = list(schools)
        sort_schools(schools, SortKey.NAME, SortOrder.ASC)
        assert schools == before

    def test_empty(self):
        assert sort_schools([]) == []

    def test_toggled_order(self):
        assert SortOrder.DESC.toggled() is SortOrder.ASC
        assert SortOrder.ASC.toggled() is SortOrder.DESC
