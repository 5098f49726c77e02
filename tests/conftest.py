"""Shared pytest fixtures for the school directory test suite."""

from __future__ import annotations

import json

import pytest
from fastapi.testclient import TestClient

from eduminatti.db.base import SchoolRepository
from eduminatti.db.factory import get_school_repository
from eduminatti.db.json_repo import JSONSchoolRepository
from eduminatti.db.models import School
from eduminatti.main import app
from tests.seed_test_data import _create_test_schools

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def schools() -> list[School]:
    return _create_test_schools()


@pytest.fixture()
def data_path(tmp_path, schools) -> str:
    """Write the test schools to a temporary JSON file and return its path."""
    path = tmp_path / "schools.json"
    records = [school.model_dump(mode="json") for school in schools]
    path.write_text(json.dumps(records, ensure_ascii=False), encoding="utf-8")
    return str(path)


@pytest.fixture()
def test_repo(data_path) -> JSONSchoolRepository:
    """Return a :class:`JSONSchoolRepository` backed by the test data file."""
    return JSONSchoolRepository(data_path)


@pytest.fixture()
def test_client(test_repo) -> TestClient:
    """Return a FastAPI ``TestClient`` wired to the test repository."""

    def _override() -> SchoolRepository:
        return test_repo

    app.dependency_overrides[get_school_repository] = _override

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
