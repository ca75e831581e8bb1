"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field, replace
from uuid import uuid4

from .comment import Comment


@dataclass
class Article:
    """Core domain entity representing a published news article.

    ``comments`` is a read-time view joined from the comments collection;
    it is never part of the persisted article document.
    """

    title: str
    content: str
    id: str = field(default_factory=lambda: str(uuid4()))
    author: str | None = None
    published_date: str | None = None  # "YYYY-MM-DDTHH:MM:SSZ", UTC
    likes: int = 0
    comments: list[Comment] = field(default_factory=list)

    def with_comments(self, comments: list[Comment]) -> "Article":
        """Return a copy of this article carrying the given comments."""
        return replace(self, comments=list(comments))

    def liked(self) -> "Article":
        """Return a copy of this article with one more like."""
        return replace(self, likes=self.likes + 1)
