"""
Pytest configuration and fixtures
"""
import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

# Register pytest-asyncio plugin explicitly
pytest_plugins = ["pytest_asyncio"]

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from scholarship_api.index import create_app  # noqa: E402
from scholarship_api.scholarships.store import ScholarshipStore, get_store  # noqa: E402


@pytest.fixture
def scholarship_store():
    """Fresh store seeded with the default records"""
    return ScholarshipStore()


@pytest.fixture
def app(scholarship_store):
    """Application wired to the per-test store"""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: scholarship_store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)
