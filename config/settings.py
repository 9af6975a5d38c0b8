"""Configuration settings for the API and UI test suites."""
import os
from typing import Dict
from pydantic import BaseModel, ConfigDict, Field
from dotenv import load_dotenv

DEFAULT_API_BASE_URL = "https://jsonplaceholder.typicode.com"
DEFAULT_UI_BASE_URL = "https://the-internet.herokuapp.com"

_dotenv_loaded = False


def _load_env() -> None:
    """Load environment variables from .env file (once per process)."""
    global _dotenv_loaded
    if not _dotenv_loaded:
        load_dotenv()
        _dotenv_loaded = True


def _default_headers() -> Dict[str, str]:
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


class ApiConfig(BaseModel):
    """Immutable settings for the REST API clients."""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_API_BASE_URL, description="Root URL of the remote API")
    timeout: float = Field(default=10.0, gt=0, description="Per-request timeout in seconds")
    retry_count: int = Field(default=3, ge=0, description="Connection attempts retried by the transport")
    headers: Dict[str, str] = Field(default_factory=_default_headers)

    def endpoint_url(self, path: str) -> str:
        """Get full URL for endpoint."""
        return f"{self.base_url.rstrip('/')}/{path.lstrip('/')}"

    def default_headers(self) -> Dict[str, str]:
        """Get a copy of the default headers."""
        return dict(self.headers)


class UiConfig(BaseModel):
    """Immutable settings for the browser page objects."""
    model_config = ConfigDict(frozen=True)

    base_url: str = Field(default=DEFAULT_UI_BASE_URL, description="Root URL of the demo web app")
    timeout_ms: int = Field(default=5000, gt=0, description="Default wait timeout in milliseconds")
    valid_username: str = Field(default="tomsmith")
    valid_password: str = Field(default="SuperSecretPassword!")


def load_api_config() -> ApiConfig:
    """Build API settings from the environment (API_BASE_URL, API_TIMEOUT, API_RETRY_COUNT)."""
    _load_env()
    values = {}
    if os.getenv("API_BASE_URL"):
        values["base_url"] = os.getenv("API_BASE_URL")
    if os.getenv("API_TIMEOUT"):
        values["timeout"] = os.getenv("API_TIMEOUT")
    if os.getenv("API_RETRY_COUNT"):
        values["retry_count"] = os.getenv("API_RETRY_COUNT")
    return ApiConfig(**values)


def load_ui_config() -> UiConfig:
    """Build UI settings from the environment (UI_BASE_URL, UI_TIMEOUT_MS)."""
    _load_env()
    values = {}
    if os.getenv("UI_BASE_URL"):
        values["base_url"] = os.getenv("UI_BASE_URL")
    if os.getenv("UI_TIMEOUT_MS"):
        values["timeout_ms"] = os.getenv("UI_TIMEOUT_MS")
    return UiConfig(**values)
