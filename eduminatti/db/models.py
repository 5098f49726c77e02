from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Category enumerations
# ---------------------------------------------------------------------------
# Values are the exact labels stored in the data file and sent by clients.
# Filtering compares them by equality, so a label typo is caught when the
# record or the request is validated rather than silently never matching.
# ---------------------------------------------------------------------------


class SchoolType(str, enum.Enum):
    """Residential arrangement offered by a school."""

    BOARDING = "Boarding"
    DAY_BOARDING = "Day Boarding"
    DAY_SCHOOL = "Day School"


class Gender(str, enum.Enum):
    """Admissions gender policy."""

    CO_ED = "Co-ed"
    BOYS = "Boys"
    GIRLS = "Girls"


class Curriculum(str, enum.Enum):
    """Examination board / curriculum followed by a school."""

    CBSE = "CBSE"
    ICSE = "ICSE"
    IB = "IB"
    CAMBRIDGE = "Cambridge"


class FeeBand(str, enum.Enum):
    """Annual fee bucket, classified on the mean of a school's fee range."""

    LOW = "low"  # under ₹3,00,000
    MEDIUM = "medium"  # ₹3,00,000 - ₹5,00,000 inclusive
    HIGH = "high"  # above ₹5,00,000


# Places offered in the location picker.  Records are not validated against
# this list so that new places can be added to the data file first.
KNOWN_LOCATIONS: tuple[str, ...] = (
    "Dehradun",
    "Mussoorie",
    "Shimla",
    "Bengaluru",
    "India",
    "Chandigarh",
    "Mumbai",
    "Faridabad",
    "Nainital",
    "Varanasi",
    "Kolkata",
    "Udaipur",
    "Jaipur",
    "Panchgani",
    "Sikar",
    "Hyderabad",
    "Pune",
    "Delhi",
    "Darjeeling",
    "Ajmer",
)


# ---------------------------------------------------------------------------
# Record
# ---------------------------------------------------------------------------


class School(BaseModel):
    """A single entry in the static school directory.

    Instances are immutable; the repository builds them once at start-up and
    every service works on the same objects.  ``fee_range`` is kept as the
    display text (e.g. ``"₹2,00,000 - ₹3,00,000"``) and parsed on demand by
    :mod:`eduminatti.services.fees`.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    location: str
    type: SchoolType
    gender: Gender
    curriculum: Curriculum
    rating: float = Field(ge=0.0, le=5.0)
    reviews: int = Field(default=0, ge=0)
    established: int
    fee_range: str
    amenities: tuple[str, ...] = ()
    images: tuple[str, ...] = ()

    @property
    def primary_image(self) -> str | None:
        """Return the first image reference, or ``None`` when there are none."""
        return self.images[0] if self.images else None
