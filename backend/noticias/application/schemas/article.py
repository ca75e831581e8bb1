"""Pydantic DTOs (Data Transfer Objects) for the Article feature.

JSON field names are camelCase (``publishedDate``) while Python attributes
stay snake_case; responses are serialized by alias.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel

from .comment import CommentResponse

_CAMEL_CONFIG = {
    "alias_generator": to_camel,
    "populate_by_name": True,
}


class ArticleCreate(BaseModel):
    """Schema for creating a new article.

    Client-supplied ``author``, ``publishedDate`` and ``likes`` are ignored;
    the server always sets them.
    """

    id: str | None = Field(None, min_length=1, examples=["2d0f6c1e-6d1b-4b8e-9a53-0d6c8f1f4b7a"])
    title: str = Field(..., min_length=1, examples=["Local elections announced"])
    content: str = Field(..., min_length=1, examples=["The council confirmed the date..."])

    model_config = _CAMEL_CONFIG


class ArticleUpdate(BaseModel):
    """Schema for updating an article — only title and content are writable."""

    title: str = Field(..., min_length=1)
    content: str = Field(..., min_length=1)

    model_config = _CAMEL_CONFIG


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    content: str
    author: str | None = None
    published_date: str | None = None
    likes: int = 0
    comments: list[CommentResponse] = []

    model_config = {**_CAMEL_CONFIG, "from_attributes": True}


class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str
