"""Entity models for the JSONPlaceholder resources."""
from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field


class _Entity(BaseModel):
    """Base for immutable API entities."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def to_payload(self) -> Dict[str, Any]:
        """Convert to a JSON request body, dropping unset optional fields."""
        return self.model_dump(by_alias=True, exclude_none=True)


class Post(_Entity):
    """Post resource (/posts)."""
    id: Optional[int] = Field(default=None, description="Server-assigned ID")
    user_id: int = Field(alias="userId", gt=0)
    title: str
    body: str


class Comment(_Entity):
    """Comment owned by a post (/posts/{id}/comments)."""
    post_id: int = Field(alias="postId")
    id: Optional[int] = None
    name: str
    email: str
    body: str


class Geo(_Entity):
    lat: str
    lng: str


class Address(_Entity):
    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(_Entity):
    name: str
    catch_phrase: str = Field(alias="catchPhrase")
    bs: str


class User(_Entity):
    """User resource (/users)."""
    id: Optional[int] = None
    name: str
    username: str
    email: str
    address: Optional[Address] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    company: Optional[Company] = None
