from __future__ import annotations

from pydantic import BaseModel, Field

from eduminatti.db.models import Curriculum, FeeBand, Gender, SchoolType
from eduminatti.services.sorting import SortKey, SortOrder


class SchoolSearchParams(BaseModel):
    """Query parameters for searching, filtering, sorting and paging schools."""

    q: str = ""
    location: str | None = None  # None = configured default, "" = all locations
    fee_range: FeeBand | None = None
    school_type: SchoolType | None = None
    gender: Gender | None = None
    curriculum: Curriculum | None = None
    rating: str | None = None  # minimum rating token, e.g. "4"
    sort_by: str = SortKey.RATING.value  # unknown keys fall back to rating
    sort_order: SortOrder = SortOrder.DESC
    page: int = Field(default=1, ge=1)
