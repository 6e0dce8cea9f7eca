"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from coffee_api.app.core.config import Settings  # noqa: E402
from coffee_api.app.main import create_app  # noqa: E402


@pytest.fixture
def settings():
    """Settings with an empty in-memory store"""
    return Settings(storage="memory", load_sample_data=False, api_prefix="")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    """Create a test client with the lifespan running"""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sqlite_settings(tmp_path):
    """Settings pointing at a fresh SQLite file"""
    return Settings(
        storage="sqlite",
        database_url=str(tmp_path / "coffee.db"),
        load_sample_data=False,
        api_prefix="",
    )
