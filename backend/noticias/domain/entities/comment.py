"""Domain entity for reader comments attached to an article."""

from dataclasses import dataclass, field
from uuid import uuid4


@dataclass
class Comment:
    """A comment left by an authenticated reader. Immutable once stored."""

    content: str
    id: str = field(default_factory=lambda: str(uuid4()))
    article_id: str | None = None
    author: str | None = None
    timestamp: str | None = None  # "YYYY-MM-DDTHH:MM:SSZ", UTC
