from __future__ import annotations

from abc import ABC, abstractmethod

from eduminatti.db.models import School
from eduminatti.services.facets import unique_values


class SchoolRepository(ABC):
    """Abstract interface for the static school data provider.

    Implementations load the data set once and hand out the same immutable
    records on every call.  The order returned by :meth:`list_schools` is the
    data set's own order; the filter pipeline preserves it.
    """

    @abstractmethod
    def list_schools(self) -> list[School]:
        """Return every school in data-set order."""
        ...

    @abstractmethod
    def get_school_by_id(self, school_id: int) -> School | None:
        """Return a single school by identifier, or ``None`` if not found."""
        ...

    def list_locations(self) -> list[str]:
        """Return a sorted list of distinct locations present in the data set."""
        return unique_values(self.list_schools(), "location")
