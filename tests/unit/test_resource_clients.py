"""Unit tests for PostClient and UserClient path and parameter binding."""
import pytest
import httpx
from unittest.mock import Mock

from config.settings import ApiConfig
from src.api.factories import PostFactory, UserFactory
from src.api.http_client import HttpClient
from src.api.post_client import PostClient
from src.api.user_client import UserClient


@pytest.fixture
def http():
    return Mock(spec=HttpClient)


# ============================================================================
# Tests for PostClient
# ============================================================================

def test_post_client_read_operations(http):
    """Test list, by-id, filter and comments map to one GET each."""
    client = PostClient(http)

    client.get_all_posts()
    client.get_post_by_id(7)
    client.get_posts_by_user_id(3)
    client.get_post_comments(7)

    assert [c.args for c in http.get.call_args_list] == [
        ("/posts",),
        ("/posts/7",),
        ("/posts",),
        ("/posts/7/comments",),
    ]
    assert http.get.call_args_list[2].kwargs == {"params": {"userId": 3}}


def test_post_client_write_operations(http):
    """Test create, replace, partial update and delete bind the right verb and path."""
    client = PostClient(http)
    post = PostFactory.create_default_post()

    client.create_post(post)
    client.update_post(1, post)
    client.patch_post(1, {"title": "Patched"})
    client.delete_post(1)

    http.post.assert_called_once_with("/posts", post)
    http.put.assert_called_once_with("/posts/1", post)
    http.patch.assert_called_once_with("/posts/1", {"title": "Patched"})
    http.delete.assert_called_once_with("/posts/1")


def test_post_count_is_list_length(http):
    """Test count is derived from the length of the list response."""
    http.get.return_value = Mock(json=Mock(return_value=[{"id": 1}, {"id": 2}, {"id": 3}]))

    assert PostClient(http).get_post_count() == 3


def test_post_client_propagates_http_errors(http):
    """Test the resource client adds no error handling of its own."""
    request = httpx.Request("GET", "https://api.test/posts/99999")
    error = httpx.HTTPStatusError("404", request=request, response=httpx.Response(404, request=request))
    http.get.side_effect = error

    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        PostClient(http).get_post_by_id(99999)

    assert exc_info.value is error


# ============================================================================
# Tests for UserClient
# ============================================================================

def test_user_client_read_operations(http):
    """Test list, by-id and username filter."""
    client = UserClient(http)

    client.get_all_users()
    client.get_user_by_id(2)
    client.get_user_by_username("Bret")

    http.get.assert_any_call("/users")
    http.get.assert_any_call("/users/2")
    http.get.assert_any_call("/users", params={"username": "Bret"})


def test_user_client_write_operations(http):
    """Test create, replace, partial update and delete."""
    client = UserClient(http)
    user = UserFactory.create_minimal_user()

    client.create_user(user)
    client.update_user(1, user)
    client.patch_user(1, {"email": "updated@example.com"})
    client.delete_user(1)

    http.post.assert_called_once_with("/users", user)
    http.put.assert_called_once_with("/users/1", user)
    http.patch.assert_called_once_with("/users/1", {"email": "updated@example.com"})
    http.delete.assert_called_once_with("/users/1")


def test_user_count_against_mock_transport():
    """Test count end to end through a real HttpClient."""
    def handler(request):
        return httpx.Response(200, json=[{"id": i} for i in range(1, 11)])

    http = HttpClient(ApiConfig(base_url="https://api.test"), transport=httpx.MockTransport(handler))
    try:
        assert UserClient(http).get_user_count() == 10
    finally:
        http.close()
