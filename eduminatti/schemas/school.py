from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from eduminatti.db.models import Curriculum, Gender, SchoolType


class SchoolResponse(BaseModel):
    """A school as shown on a listing card."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    location: str
    type: SchoolType
    gender: Gender
    curriculum: Curriculum
    rating: float
    reviews: int
    established: int
    fee_range: str
    amenities: list[str] = []
    images: list[str] = []
    primary_image: str | None = None


class PageWindowResponse(BaseModel):
    """Page-number controls for the pagination bar."""

    model_config = ConfigDict(from_attributes=True)

    current_page: int
    total_pages: int
    pages: list[int]
    show_first: bool
    leading_ellipsis: bool
    show_last: bool
    trailing_ellipsis: bool


class SchoolPageResponse(BaseModel):
    """One page of the filtered, sorted school listing."""

    items: list[SchoolResponse]
    total_count: int
    total_pages: int
    page: int
    page_size: int
    start_index: int
    end_index: int
    display_start: int
    display_end: int
    has_previous: bool
    has_next: bool
    sort_by: str
    sort_by_label: str
    sort_order: str
    active_filters: dict[str, str] = {}
    page_window: PageWindowResponse


class FacetsResponse(BaseModel):
    """Number of schools per value of each filterable field."""

    location: dict[str, int]
    type: dict[str, int]
    gender: dict[str, int]
    curriculum: dict[str, int]
