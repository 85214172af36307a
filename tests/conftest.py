"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.timeflow_service.main import app


@pytest.fixture
def client() -> TestClient:
    """Test client for the FastAPI app."""
    return TestClient(app)
