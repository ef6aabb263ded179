"""Pytest configuration and fixtures for GitHub Stars Contributions MCP Server tests."""

from typing import Any, Dict
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastmcp import Context

from github_stars_contributions_mcp import shared
from github_stars_contributions_mcp.config import Settings


@pytest.fixture
def test_settings() -> Settings:
    """Create test settings with mock values."""
    return Settings(
        github_stars_token="test_token_123",
        log_level="DEBUG"
    )


@pytest.fixture
def mock_context() -> MagicMock:
    """Create a mock FastMCP context for testing."""
    context = MagicMock(spec=Context)
    context.info = AsyncMock()
    context.warning = AsyncMock()
    context.error = AsyncMock()
    context.debug = AsyncMock()
    return context


@pytest.fixture
def mock_stars_client(monkeypatch) -> AsyncMock:
    """Install a mock GitHub Stars client as the shared client."""
    client = AsyncMock()
    client.token = "test_token_123"
    client.execute = AsyncMock(return_value={})
    monkeypatch.setattr(shared, "stars_client", client)
    return client


@pytest.fixture
def sample_contribution() -> Dict[str, Any]:
    """Sample contribution as returned by the API."""
    return {
        "id": "contrib-1",
        "title": "Intro to GraphQL",
        "type": "SPEAKING",
        "date": "2024-01-15T00:00:00.000Z",
        "url": "https://example.com/talk",
        "description": "A talk about GraphQL"
    }


@pytest.fixture
def sample_link() -> Dict[str, Any]:
    """Sample profile link as returned by the API."""
    return {
        "id": "link-1",
        "link": "https://dev.to/octocat",
        "platform": "DEV_TO"
    }


@pytest.fixture
def sample_public_profile(sample_contribution, sample_link) -> Dict[str, Any]:
    """Sample public profile as returned by the API."""
    return {
        "id": "star-1",
        "username": "octocat",
        "name": "The Octocat",
        "bio": "A great octopus",
        "avatar": "https://avatars.githubusercontent.com/u/583231",
        "status": "ACTIVE",
        "featured": True,
        "country": "United States",
        "contributions": [sample_contribution],
        "links": [sample_link]
    }


@pytest.fixture
def sample_logged_user() -> Dict[str, Any]:
    """Sample logged-in user as returned by the API."""
    return {
        "id": "user-1",
        "username": "octocat",
        "avatar": "https://avatars.githubusercontent.com/u/583231",
        "email": "octocat@github.com",
        "nominee": {
            "status": "ACCEPTED",
            "name": "The Octocat",
            "bio": "A great octopus",
            "featured": False,
            "country": "United States",
            "jobTitle": "Mascot",
            "company": "GitHub"
        }
    }


def make_response(status_code: int = 200, json_data: Any = None, text: str = "") -> MagicMock:
    """Create a mock httpx response."""
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    if isinstance(json_data, Exception):
        response.json.side_effect = json_data
    else:
        response.json.return_value = json_data
    return response


@pytest.fixture
def response_factory():
    """Factory for mock httpx responses."""
    return make_response


# Environment setup for tests
@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Setup test environment variables and isolate from any local .env file."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("GITHUB_STARS_TOKEN", "test_token_123")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.delenv("STARS_API_URL", raising=False)
    monkeypatch.delenv("LOG_FILE", raising=False)
    monkeypatch.delenv("REQUEST_TIMEOUT", raising=False)
