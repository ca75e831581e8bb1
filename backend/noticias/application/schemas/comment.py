"""Pydantic DTOs for article comments."""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class CommentCreate(BaseModel):
    """Schema for posting a comment. Only ``content`` is taken from the client."""

    content: str = Field(..., min_length=1, examples=["Great reporting!"])


class CommentResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    article_id: str | None = None
    author: str | None = None
    content: str
    timestamp: str | None = None

    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }
