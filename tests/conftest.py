"""Shared pytest fixtures for the API suites."""
import pytest

from config.settings import ApiConfig, load_api_config
from src.api.http_client import HttpClient
from src.api.post_client import PostClient
from src.api.user_client import UserClient


@pytest.fixture(scope="session")
def api_config() -> ApiConfig:
    """API settings built once per session from the environment."""
    return load_api_config()


@pytest.fixture
def http_client(api_config):
    """HTTP client against the configured base URL."""
    client = HttpClient(api_config)
    yield client
    client.close()


@pytest.fixture
def post_client(http_client) -> PostClient:
    return PostClient(http_client)


@pytest.fixture
def user_client(http_client) -> UserClient:
    return UserClient(http_client)
