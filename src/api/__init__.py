"""REST API clients, data factories and response validators."""
from src.api.http_client import HttpClient
from src.api.post_client import PostClient
from src.api.user_client import UserClient
from src.api.factories import PostFactory, UserFactory

__all__ = ["HttpClient", "PostClient", "UserClient", "PostFactory", "UserFactory"]
