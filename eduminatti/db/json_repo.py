from __future__ import annotations

import logging
from pathlib import Path

from pydantic import TypeAdapter

from eduminatti.db.base import SchoolRepository
from eduminatti.db.models import KNOWN_LOCATIONS, School
from eduminatti.services.fees import parse_fee_range

logger = logging.getLogger(__name__)

_SCHOOL_LIST = TypeAdapter(list[School])


class JSONSchoolRepository(SchoolRepository):
    """Static data set read from a JSON array of school objects.

    The file is read and validated on first use and kept in memory for the
    lifetime of the repository.

    Raises:
        FileNotFoundError: If *path* does not exist (on first access).
        pydantic.ValidationError: If a record does not match :class:`School`.
        ValueError: If two records share an ``id``.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._schools: list[School] | None = None
        self._by_id: dict[int, School] = {}

    @classmethod
    def from_schools(cls, schools: list[School]) -> JSONSchoolRepository:
        """Build a repository over records that are already in memory."""
        repo = cls("<memory>")
        repo._set_schools(list(schools))
        return repo

    def _set_schools(self, schools: list[School]) -> None:
        by_id: dict[int, School] = {}
        for school in schools:
            if school.id in by_id:
                raise ValueError(f"Duplicate school id {school.id} in {self._path}")
            by_id[school.id] = school
            if parse_fee_range(school.fee_range) is None:
                logger.warning(
                    "School %d (%s) has an unparseable fee range %r – excluded whenever a fee filter is active",
                    school.id,
                    school.name,
                    school.fee_range,
                )
            if school.location not in KNOWN_LOCATIONS:
                logger.warning("School %d (%s) has an unknown location %r", school.id, school.name, school.location)
        self._schools = schools
        self._by_id = by_id

    def _load(self) -> list[School]:
        if self._schools is None:
            schools = _SCHOOL_LIST.validate_json(self._path.read_bytes())
            self._set_schools(schools)
            logger.info("Loaded %d schools from %s", len(schools), self._path)
        return self._schools

    def list_schools(self) -> list[School]:
        return list(self._load())

    def get_school_by_id(self, school_id: int) -> School | None:
        self._load()
        return self._by_id.get(school_id)
