"""Generic HTTP client shared by every resource client."""
import logging
from typing import Any, Dict, Optional
import httpx
from pydantic import BaseModel

from config.settings import ApiConfig

logger = logging.getLogger(__name__)


def _to_json(body: Any) -> Any:
    """Convert model instances to plain JSON bodies."""
    if isinstance(body, BaseModel):
        return body.model_dump(by_alias=True, exclude_none=True)
    return body


class HttpClient:
    """
    Thin wrapper around httpx.Client bound to one base URL.

    Every verb raises on transport failure and on non-2xx status. Failures are
    logged for diagnostics and re-raised unchanged.
    """

    def __init__(self, config: ApiConfig, transport: Optional[httpx.BaseTransport] = None):
        self.config = config
        if transport is None:
            # Retries only cover connection establishment (httpx semantics)
            transport = httpx.HTTPTransport(retries=config.retry_count)
        self._client = httpx.Client(
            base_url=config.base_url,
            timeout=config.timeout,
            headers=config.default_headers(),
            transport=transport,
        )

    def _request(
        self,
        method: str,
        path: str,
        body: Any = None,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """Send one request, logging and re-raising any failure."""
        logger.debug(f"{method} {path} params={params}")
        try:
            response = self._client.request(
                method,
                path,
                json=_to_json(body) if body is not None else None,
                params=params,
                headers=headers,
            )
            response.raise_for_status()
            return response
        except httpx.HTTPError as e:
            self._handle_error(e)
            raise

    def _handle_error(self, error: httpx.HTTPError) -> None:
        if isinstance(error, httpx.HTTPStatusError):
            response = error.response
            logger.error(f"API Error: {response.status_code} - {response.reason_phrase}")
            if response.content:
                logger.error(f"Response: {response.text}")
        elif isinstance(error, httpx.TransportError):
            logger.error(f"No response received from server: {error!r}")
        else:
            logger.error(f"Error: {error}")

    def get(self, path: str, params: Optional[Dict[str, Any]] = None,
            headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """GET request."""
        return self._request("GET", path, params=params, headers=headers)

    def post(self, path: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """POST request."""
        return self._request("POST", path, body=body, headers=headers)

    def put(self, path: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """PUT request."""
        return self._request("PUT", path, body=body, headers=headers)

    def patch(self, path: str, body: Any = None, headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """PATCH request."""
        return self._request("PATCH", path, body=body, headers=headers)

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None,
               headers: Optional[Dict[str, str]] = None) -> httpx.Response:
        """DELETE request."""
        return self._request("DELETE", path, params=params, headers=headers)

    @staticmethod
    def status_code(response: httpx.Response) -> int:
        return response.status_code

    @staticmethod
    def response_body(response: httpx.Response) -> Any:
        """Parsed JSON body, or raw text when the body is not JSON."""
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def response_headers(response: httpx.Response) -> Dict[str, str]:
        return dict(response.headers)

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
