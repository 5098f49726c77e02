from __future__ import annotations

from functools import lru_cache

from eduminatti.config import get_settings
from eduminatti.db.base import SchoolRepository
from eduminatti.db.json_repo import JSONSchoolRepository


@lru_cache
def _json_repository(path: str) -> JSONSchoolRepository:
    return JSONSchoolRepository(path)


def get_school_repository() -> SchoolRepository:
    """Return the appropriate :class:`SchoolRepository` implementation.

    The backend is selected by the ``DATA_BACKEND`` setting:

    * ``"json"`` (default) -- :class:`JSONSchoolRepository` over ``SCHOOLS_DATA_PATH``

    The repository is shared per data path so the file is only read once.

    Raises:
        ValueError: If the requested backend is unknown.
    """
    settings = get_settings()
    backend = settings.DATA_BACKEND.lower()

    if backend == "json":
        return _json_repository(settings.SCHOOLS_DATA_PATH)

    raise ValueError(f"Unknown DATA_BACKEND: {backend!r}. Supported values: 'json'.")
