"""Realistic school records shared by the test suite."""

from __future__ import annotations

from eduminatti.db.models import School


def make_school(**overrides) -> School:
    """Return a school with sensible defaults, overridden by *overrides*."""
    values = {
        "id": 1,
        "name": "Test School",
        "location": "Dehradun",
        "type": "Day School",
        "gender": "Co-ed",
        "curriculum": "CBSE",
        "rating": 4.0,
        "reviews": 10,
        "established": 1990,
        "fee_range": "₹2,00,000 - ₹3,00,000",
        "amenities": ("Library",),
        "images": ("/images/test-1.jpg",),
    }
    values.update(overrides)
    return School(**values)


def _create_test_schools() -> list[School]:
    """Return a fresh list of realistic school records across several locations."""
    return [
        make_school(
            id=1,
            name="The Doon School",
            location="Dehradun",
            type="Boarding",
            gender="Boys",
            curriculum="IB",
            rating=4.8,
            reviews=412,
            established=1935,
            fee_range="₹10,50,000 - ₹12,00,000",
        ),
        make_school(
            id=2,
            name="Welham Girls' School",
            location="Dehradun",
            type="Boarding",
            gender="Girls",
            curriculum="CBSE",
            rating=4.7,
            reviews=286,
            established=1957,
            fee_range="₹6,50,000 - ₹7,00,000",
        ),
        make_school(
            id=3,
            name="Summer Valley School",
            location="Dehradun",
            type="Day School",
            gender="Co-ed",
            curriculum="CBSE",
            rating=4.1,
            reviews=95,
            established=1988,
            fee_range="₹1,20,000 - ₹1,60,000",
        ),
        make_school(
            id=4,
            name="Oak Grove School",
            location="Mussoorie",
            type="Boarding",
            gender="Co-ed",
            curriculum="CBSE",
            rating=4.2,
            reviews=131,
            established=1888,
            fee_range="₹2,00,000 - ₹3,00,000",
        ),
        make_school(
            id=5,
            name="Bishop Cotton School",
            location="Shimla",
            type="Boarding",
            gender="Boys",
            curriculum="ICSE",
            rating=4.4,
            reviews=174,
            established=1859,
            fee_range="₹4,00,000 - ₹6,00,000",
        ),
        make_school(
            id=6,
            name="Kimmins High School",
            location="Panchgani",
            type="Day Boarding",
            gender="Girls",
            curriculum="ICSE",
            rating=3.9,
            reviews=54,
            established=1898,
            fee_range="₹2,50,000 - ₹3,50,000",
            images=(),
        ),
        make_school(
            id=7,
            name="Mallya Aditi International School",
            location="Bengaluru",
            type="Day School",
            gender="Co-ed",
            curriculum="Cambridge",
            rating=4.0,
            reviews=87,
            established=1984,
            fee_range="Fees on request",
        ),
    ]


