from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from eduminatti.config import Settings, get_settings
from eduminatti.db.base import SchoolRepository
from eduminatti.db.factory import get_school_repository
from eduminatti.schemas.filters import SchoolSearchParams
from eduminatti.schemas.school import PageWindowResponse, SchoolPageResponse, SchoolResponse
from eduminatti.services.browse import BrowseResult, BrowseState, browse
from eduminatti.services.facets import active_filter_labels, sort_display_name
from eduminatti.services.filters import SchoolFilters, SchoolQuery
from eduminatti.services.sorting import SortKey

logger = logging.getLogger(__name__)

router = APIRouter(tags=["schools"])


def _to_browse_state(params: SchoolSearchParams, settings: Settings) -> BrowseState:
    """Convert API search params to a first-page :class:`BrowseState`.

    An omitted *location* falls back to ``DEFAULT_LOCATION``; an explicit
    empty string means all locations.
    """
    location = params.location if params.location is not None else settings.DEFAULT_LOCATION
    filters = SchoolFilters(
        fee_range=params.fee_range,
        school_type=params.school_type,
        gender=params.gender,
        curriculum=params.curriculum,
        rating=params.rating or None,
    )
    return BrowseState(
        query=SchoolQuery(text=params.q, location=location, filters=filters),
        sort_key=SortKey.parse(params.sort_by),
        sort_order=params.sort_order,
    )


def _to_page_response(result: BrowseResult) -> SchoolPageResponse:
    page = result.page
    state = result.state
    return SchoolPageResponse(
        items=[SchoolResponse.model_validate(school) for school in page.items],
        total_count=page.total_count,
        total_pages=page.total_pages,
        page=page.page,
        page_size=page.page_size,
        start_index=page.start_index,
        end_index=page.end_index,
        display_start=page.display_start,
        display_end=page.display_end,
        has_previous=page.has_previous,
        has_next=page.has_next,
        sort_by=state.sort_key.value,
        sort_by_label=sort_display_name(state.sort_key),
        sort_order=state.sort_order.value,
        active_filters=active_filter_labels(state.query.filters),
        page_window=PageWindowResponse.model_validate(result.window),
    )


@router.get("/api/schools", response_model=SchoolPageResponse)
async def list_schools(
    params: Annotated[SchoolSearchParams, Query()],
    repo: Annotated[SchoolRepository, Depends(get_school_repository)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> SchoolPageResponse:
    """Search, filter, sort and page the school directory.

    A *page* outside the result's page range is ignored and page 1 is returned.
    """
    schools = repo.list_schools()
    state = _to_browse_state(params, settings)
    result = browse(schools, state, settings.PAGE_SIZE, settings.MAX_VISIBLE_PAGES)

    if params.page != state.page:
        requested = state.go_to_page(params.page, result.page.total_pages)
        if requested is state:
            logger.debug("Page %d out of range for %d results – serving page 1", params.page, result.page.total_count)
        else:
            result = browse(schools, requested, settings.PAGE_SIZE, settings.MAX_VISIBLE_PAGES)

    return _to_page_response(result)


@router.get("/api/schools/{school_id}", response_model=SchoolResponse)
async def get_school(
    school_id: int,
    repo: Annotated[SchoolRepository, Depends(get_school_repository)],
) -> SchoolResponse:
    """Get full details for a single school."""
    school = repo.get_school_by_id(school_id)
    if school is None:
        raise HTTPException(status_code=404, detail="School not found")
    return SchoolResponse.model_validate(school)
