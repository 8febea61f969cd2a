"""
Shared test fixtures: API test client.
"""

import pytest
from fastapi.testclient import TestClient

from caldeiraria.main import app


@pytest.fixture
def client():
    """FastAPI test client."""
    return TestClient(app)
