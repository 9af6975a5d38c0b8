"""API client for the /posts resource."""
from typing import Any, Dict, Union
import httpx

from src.api.http_client import HttpClient
from src.api.models import Post

PostBody = Union[Post, Dict[str, Any]]


class PostClient:
    """Post endpoints layered on a shared HttpClient."""

    base_endpoint = "/posts"

    def __init__(self, http: HttpClient):
        self.http = http

    def get_all_posts(self) -> httpx.Response:
        """Get all posts."""
        return self.http.get(self.base_endpoint)

    def get_post_by_id(self, post_id: int) -> httpx.Response:
        """Get post by ID."""
        return self.http.get(f"{self.base_endpoint}/{post_id}")

    def create_post(self, post: PostBody) -> httpx.Response:
        """Create a new post."""
        return self.http.post(self.base_endpoint, post)

    def update_post(self, post_id: int, post: PostBody) -> httpx.Response:
        """Replace post by ID (PUT)."""
        return self.http.put(f"{self.base_endpoint}/{post_id}", post)

    def patch_post(self, post_id: int, fields: Dict[str, Any]) -> httpx.Response:
        """Partially update post by ID (PATCH)."""
        return self.http.patch(f"{self.base_endpoint}/{post_id}", fields)

    def delete_post(self, post_id: int) -> httpx.Response:
        """Delete post by ID."""
        return self.http.delete(f"{self.base_endpoint}/{post_id}")

    def get_posts_by_user_id(self, user_id: int) -> httpx.Response:
        """Get posts filtered by the userId query parameter."""
        return self.http.get(self.base_endpoint, params={"userId": user_id})

    def get_post_count(self) -> int:
        return len(self.get_all_posts().json())

    def get_post_comments(self, post_id: int) -> httpx.Response:
        """Get comments for a specific post."""
        return self.http.get(f"{self.base_endpoint}/{post_id}/comments")
