"""
Pytest configuration and fixtures for secure access gateway tests.
"""
import pytest
from typing import Dict, Optional
from fastapi.testclient import TestClient
from starlette.requests import Request
from unittest.mock import patch

from main import app
from core.config import settings


@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment before each test"""
    # Ensure we're using test configuration
    with patch.object(settings, "api_keys", "test-key-1,test-key-2"), \
            patch.object(settings, "jwt_secret_key", "test-secret-key-for-testing"), \
            patch.object(settings, "login_message", ""):
        yield


@pytest.fixture
def client():
    """FastAPI test client fixture"""
    return TestClient(app)


@pytest.fixture
def authenticated_client(client):
    """Test client logged in through the login form"""
    response = client.post("/login", data={
        "api_key": "test-key-1",
        "username": "testuser"
    }, follow_redirects=False)
    assert response.status_code == 302
    return client


@pytest.fixture
def make_request():
    """Factory for bare Starlette requests"""
    def _make_request(path: str = "/", query: str = "", cookies: Optional[Dict[str, str]] = None) -> Request:
        headers = []
        if cookies:
            cookie_header = "; ".join(f"{name}={value}" for name, value in cookies.items())
            headers.append((b"cookie", cookie_header.encode()))
        scope = {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "server": ("testserver", 80),
            "path": path,
            "query_string": query.encode(),
            "headers": headers,
        }
        return Request(scope)

    return _make_request
