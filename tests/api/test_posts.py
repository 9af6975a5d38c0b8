"""Live tests for JSONPlaceholder post endpoints."""
import pytest
import httpx

from src.api import validators as v
from src.api.factories import PostFactory

pytestmark = pytest.mark.live

POST_FIELDS = ["id", "userId", "title", "body"]
POST_SCHEMA = {"id": "number", "userId": "number", "title": "string", "body": "string"}


def test_get_all_posts(post_client):
    response = post_client.get_all_posts()
    v.validate_status_code(response.status_code, 200)
    posts = response.json()
    v.validate_array_response(posts, 1)
    v.validate_array_items_have_fields(posts, POST_FIELDS)


def test_get_post_by_id(post_client):
    response = post_client.get_post_by_id(1)
    v.validate_status_code(response.status_code, 200)
    v.validate_field_value(response.json(), "id", 1)
    v.validate_response_schema(response.json(), POST_SCHEMA)


def test_get_post_by_id_is_idempotent(post_client):
    """Test two reads of the same post are structurally equal."""
    first = post_client.get_post_by_id(2).json()
    second = post_client.get_post_by_id(2).json()
    v.validate_object_equality(second, first)


def test_get_non_existent_post_raises_404(post_client):
    """Test a missing post surfaces as HTTPStatusError with status 404."""
    with pytest.raises(httpx.HTTPStatusError) as exc_info:
        post_client.get_post_by_id(99999)
    v.validate_status_code(exc_info.value.response.status_code, 404)


def test_get_post_count(post_client):
    assert post_client.get_post_count() > 0


def test_get_posts_by_user_id(post_client):
    posts = post_client.get_posts_by_user_id(1).json()
    v.validate_array_response(posts, 1)
    for post in posts:
        v.validate_field_value(post, "userId", 1)


def test_get_post_comments(post_client):
    response = post_client.get_post_comments(1)
    comments = response.json()
    v.validate_array_response(comments, 1)
    v.validate_array_items_have_fields(comments, ["postId", "id", "name", "email", "body"])
    for comment in comments:
        v.validate_email_format(comment["email"])


def test_create_post(post_client):
    new_post = PostFactory.create_post(1, "New Test Post", "Body of the new test post")
    response = post_client.create_post(new_post)
    v.validate_status_code(response.status_code, 201)
    data = response.json()
    for field, value in new_post.to_payload().items():
        v.validate_field_value(data, field, value)
    v.validate_field_present(data, "id")


@pytest.mark.parametrize("post", [
    PostFactory.create_long_post(1),
    PostFactory.create_post_with_special_chars(1),
    PostFactory.create_minimal_post(2),
], ids=["long", "special-chars", "minimal"])
def test_create_post_echoes_factory_variants(post_client, post):
    data = post_client.create_post(post).json()
    v.validate_object_equality({k: data[k] for k in ("userId", "title", "body")}, post.to_payload())


def test_create_posts_in_batch(post_client):
    for post in PostFactory.create_posts(1, 3):
        response = post_client.create_post(post)
        v.validate_status_code(response.status_code, 201)
        v.validate_field_value(response.json(), "title", post.title)


def test_update_post_with_put(post_client):
    updated = PostFactory.create_post(1, "Updated Title", "Updated body")
    response = post_client.update_post(1, updated)
    v.validate_status_code(response.status_code, 200)
    v.validate_field_value(response.json(), "title", "Updated Title")


def test_patch_post(post_client):
    response = post_client.patch_post(1, {"title": "Patched Title"})
    v.validate_status_code(response.status_code, 200)
    v.validate_field_value(response.json(), "title", "Patched Title")
    v.validate_field_value(response.json(), "id", 1)


def test_delete_post(post_client):
    response = post_client.delete_post(1)
    v.validate_status_code_in(response.status_code, [200, 204])


def test_posts_have_non_empty_text(post_client):
    for post in post_client.get_all_posts().json()[:10]:
        v.validate_string_field(post["title"], 1)
        v.validate_string_field(post["body"], 1)
        v.validate_number_field(post["userId"], 1)


def test_post_responses_are_json_and_fast(post_client):
    response = post_client.get_all_posts()
    v.validate_content_type(response.headers)
    v.validate_response_time(response.elapsed, 5000)
    v.validate_json_serializable(response.json())
