"""Unit tests for configuration loading."""
import pytest
from pydantic import ValidationError

from config import settings
from config.settings import ApiConfig, UiConfig, load_api_config, load_ui_config


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("API_BASE_URL", "API_TIMEOUT", "API_RETRY_COUNT", "UI_BASE_URL", "UI_TIMEOUT_MS"):
        monkeypatch.delenv(name, raising=False)
    # Skip reading a developer's .env during these tests
    monkeypatch.setattr(settings, "_dotenv_loaded", True)


def test_api_defaults():
    config = load_api_config()
    assert config.base_url == "https://jsonplaceholder.typicode.com"
    assert config.timeout == 10.0
    assert config.retry_count == 3
    assert config.default_headers() == {"Content-Type": "application/json", "Accept": "application/json"}


def test_api_env_overrides(monkeypatch):
    monkeypatch.setenv("API_BASE_URL", "http://localhost:3000")
    monkeypatch.setenv("API_TIMEOUT", "2.5")
    monkeypatch.setenv("API_RETRY_COUNT", "0")

    config = load_api_config()

    assert config.base_url == "http://localhost:3000"
    assert config.timeout == 2.5
    assert config.retry_count == 0


def test_invalid_env_value_raises(monkeypatch):
    monkeypatch.setenv("API_TIMEOUT", "soon")
    with pytest.raises(ValidationError):
        load_api_config()


def test_endpoint_url_joins_slashes():
    config = ApiConfig(base_url="https://api.test/")
    assert config.endpoint_url("/posts/1") == "https://api.test/posts/1"
    assert config.endpoint_url("users") == "https://api.test/users"


def test_config_is_immutable_and_headers_are_copied():
    config = ApiConfig()
    headers = config.default_headers()
    headers["X-Extra"] = "1"
    assert "X-Extra" not in config.default_headers()
    with pytest.raises(ValidationError):
        config.timeout = 1.0


def test_ui_defaults_and_overrides(monkeypatch):
    assert load_ui_config() == UiConfig()
    monkeypatch.setenv("UI_BASE_URL", "http://localhost:7080")
    monkeypatch.setenv("UI_TIMEOUT_MS", "1000")
    config = load_ui_config()
    assert config.base_url == "http://localhost:7080"
    assert config.timeout_ms == 1000
    assert config.valid_username == "tomsmith"
