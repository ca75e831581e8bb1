"""Abstract comment repository interface."""

from abc import ABC, abstractmethod

from noticias.domain.entities import Comment


class CommentRepository(ABC):
    """Port for comment persistence. Comments are append-only."""

    @abstractmethod
    async def create(self, comment: Comment) -> Comment:
        """Persist a new comment and return it."""
        ...

    @abstractmethod
    async def get_by_article(self, article_id: str) -> list[Comment]:
        """Retrieve the comments attached to an article, in store order."""
        ...
