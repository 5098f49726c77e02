from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from eduminatti.db.base import SchoolRepository
from eduminatti.db.factory import get_school_repository
from eduminatti.schemas.school import FacetsResponse
from eduminatti.services.facets import facet_counts

router = APIRouter(tags=["locations"])


@router.get("/api/locations", response_model=list[str])
async def list_locations(
    repo: Annotated[SchoolRepository, Depends(get_school_repository)],
) -> list[str]:
    """List all locations that have at least one school."""
    return repo.list_locations()


@router.get("/api/facets", response_model=FacetsResponse)
async def get_facets(
    repo: Annotated[SchoolRepository, Depends(get_school_repository)],
) -> FacetsResponse:
    """Count schools per location, type, gender and curriculum across the whole directory."""
    schools = repo.list_schools()
    return FacetsResponse(
        location=facet_counts(schools, "location"),
        type=facet_counts(schools, "type"),
        gender=facet_counts(schools, "gender"),
        curriculum=facet_counts(schools, "curriculum"),
    )
