from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from eduminatti.api.health import router as health_router
from eduminatti.api.locations import router as locations_router
from eduminatti.api.schools import router as schools_router
from eduminatti.config import get_settings
from eduminatti.db.factory import get_school_repository

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Load the static school data set once on startup so bad data fails fast."""
    repo = app.dependency_overrides.get(get_school_repository, get_school_repository)()
    schools = repo.list_schools()
    logger.info("School directory ready with %d schools", len(schools))
    yield


_settings = get_settings()
logging.basicConfig(level=_settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(
    title="Eduminatti School Directory API",
    description="API for searching, filtering and browsing a directory of schools",
    version="0.1.0",
    lifespan=lifespan,
)

_cors_origins = [o.strip() for o in _settings.CORS_ORIGINS.split(",") if o.strip()] if _settings.CORS_ORIGINS else []
if _cors_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(schools_router)
app.include_router(locations_router)
app.include_router(health_router)


if __name__ == "__main__":
    uvicorn.run("eduminatti.main:app", host="0.0.0.0", port=8000, reload=True)
