"""
pytest fixtures for the Developer API test suite.

Every test gets its own SQLite file under ``tmp_path`` so tests never
share state.
"""

import pytest
from fastapi.testclient import TestClient

from developer_api.app.main import create_app
from developer_api.app.services.developer_service import DeveloperRepository


@pytest.fixture
def db_path(tmp_path):
    return str(tmp_path / "developers.db")


@pytest.fixture
def repository(db_path):
    repo = DeveloperRepository(db_path)
    repo.init_db()
    return repo


@pytest.fixture
def client(repository):
    """TestClient over an app wired to the temporary repository."""
    app = create_app(repository=repository)
    with TestClient(app) as test_client:
        yield test_client
