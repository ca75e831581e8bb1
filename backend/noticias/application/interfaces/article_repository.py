"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from noticias.domain.entities import Article


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def get_by_id(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Article]:
        """Retrieve every article, in store order."""
        ...

    @abstractmethod
    async def create(self, article: Article) -> Article:
        """Persist a new article and return it.

        Raises:
            DuplicateEntityError: If an article with the same id exists.
        """
        ...

    @abstractmethod
    async def update(self, article_id: str, title: str, content: str) -> bool:
        """Overwrite title and content only. Returns False if not found."""
        ...

    @abstractmethod
    async def save(self, article: Article) -> Article:
        """Overwrite the full stored document of an article."""
        ...

    @abstractmethod
    async def delete(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...
