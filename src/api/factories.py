"""Test data factories for posts, comments and users."""
from typing import List, Optional

from src.api.models import Address, Comment, Company, Geo, Post, User

LONG_BODY_SENTENCE = "Lorem ipsum dolor sit amet, consectetur adipiscing elit. "


class PostFactory:
    """Factory methods for post and comment test data."""

    @staticmethod
    def create_default_post() -> Post:
        return Post(
            user_id=1,
            title="Test Post Title",
            body="This is a test post body with meaningful content for testing purposes.",
        )

    @staticmethod
    def create_post(user_id: int, title: str, body: str) -> Post:
        return Post(user_id=user_id, title=title, body=body)

    @staticmethod
    def create_posts(user_id: int, count: int) -> List[Post]:
        """Create `count` posts; item N carries N in its title and body."""
        return [
            Post(
                user_id=user_id,
                title=f"Test Post {i}",
                body=f"This is test post body number {i} with meaningful content for testing.",
            )
            for i in range(1, count + 1)
        ]

    @staticmethod
    def create_minimal_post(user_id: int) -> Post:
        return Post(user_id=user_id, title="Minimal Post", body="Minimal post body")

    @staticmethod
    def create_long_post(user_id: int) -> Post:
        return Post(user_id=user_id, title="Long Content Post", body=LONG_BODY_SENTENCE * 10)

    @staticmethod
    def create_post_with_special_chars(user_id: int) -> Post:
        return Post(
            user_id=user_id,
            title="Post with Special Chars: @#$%^&*()",
            body="Body with special chars: !@#$%^&*()_+-=[]{}|;:,.<>?",
        )

    @classmethod
    def create_posts_by_user(cls, user_id: int, count: int) -> List[Post]:
        return cls.create_posts(user_id, count)

    @staticmethod
    def create_comment(post_id: int) -> Comment:
        return Comment(
            post_id=post_id,
            name="Test Comment Name",
            email="comment@example.com",
            body="This is a test comment body for testing purposes.",
        )

    @staticmethod
    def create_comments(post_id: int, count: int) -> List[Comment]:
        return [
            Comment(
                post_id=post_id,
                name=f"Comment Author {i}",
                email=f"comment{i}@example.com",
                body=f"This is test comment number {i}",
            )
            for i in range(1, count + 1)
        ]

    @staticmethod
    def create_custom_comment(post_id: int, name: str, email: str, body: str) -> Comment:
        return Comment(post_id=post_id, name=name, email=email, body=body)


def _default_address() -> Address:
    return Address(
        street="123 Test St",
        suite="Apt 1",
        city="Test City",
        zipcode="12345-6789",
        geo=Geo(lat="40.7128", lng="-74.0060"),
    )


def _default_company() -> Company:
    return Company(name="Test Company", catch_phrase="Test tagline", bs="test business service")


class UserFactory:
    """Factory methods for user test data."""

    @classmethod
    def create_default_user(cls) -> User:
        return cls.create_user("Test User", "testuser", "testuser@example.com")

    @staticmethod
    def create_user(name: str, username: str, email: str) -> User:
        """Create a fully populated user with the given identity fields."""
        return User(
            name=name,
            username=username,
            email=email,
            address=_default_address(),
            phone="1-123-456-7890",
            website="https://testuser.com",
            company=_default_company(),
        )

    @classmethod
    def create_users(cls, count: int) -> List[User]:
        return [
            cls.create_user(f"User {i}", f"user{i}", f"user{i}@example.com")
            for i in range(1, count + 1)
        ]

    @staticmethod
    def create_minimal_user() -> User:
        return User(name="Minimal User", username="minimaluser", email="minimal@example.com")

    @staticmethod
    def create_user_with_custom_data(
        name: str,
        username: str,
        email: str,
        phone: Optional[str] = None,
        website: Optional[str] = None,
    ) -> User:
        return User(name=name, username=username, email=email, phone=phone, website=website)
