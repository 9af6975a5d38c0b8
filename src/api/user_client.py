"""API client for the /users resource."""
from typing import Any, Dict, Union
import httpx

from src.api.http_client import HttpClient
from src.api.models import User

UserBody = Union[User, Dict[str, Any]]


class UserClient:
    """User endpoints layered on a shared HttpClient."""

    base_endpoint = "/users"

    def __init__(self, http: HttpClient):
        self.http = http

    def get_all_users(self) -> httpx.Response:
        return self.http.get(self.base_endpoint)

    def get_user_by_id(self, user_id: int) -> httpx.Response:
        return self.http.get(f"{self.base_endpoint}/{user_id}")

    def create_user(self, user: UserBody) -> httpx.Response:
        return self.http.post(self.base_endpoint, user)

    def update_user(self, user_id: int, user: UserBody) -> httpx.Response:
        """Replace user by ID (PUT)."""
        return self.http.put(f"{self.base_endpoint}/{user_id}", user)

    def patch_user(self, user_id: int, fields: Dict[str, Any]) -> httpx.Response:
        """Partially update user by ID (PATCH)."""
        return self.http.patch(f"{self.base_endpoint}/{user_id}", fields)

    def delete_user(self, user_id: int) -> httpx.Response:
        return self.http.delete(f"{self.base_endpoint}/{user_id}")

    def get_user_by_username(self, username: str) -> httpx.Response:
        """Get users filtered by the username query parameter."""
        return self.http.get(self.base_endpoint, params={"username": username})

    def get_user_count(self) -> int:
        return len(self.get_all_users().json())
