"""Application service (use case) for Article and Comment operations."""

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime, timezone

from noticias.application.interfaces import ArticleRepository, CommentRepository
from noticias.application.schemas import ArticleCreate, ArticleUpdate, CommentCreate
from noticias.domain.entities import Article, Comment
from noticias.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ArticleService:
    """Orchestrates article and comment logic. Depends on the repository ports (DI).

    "Not found" is a normal negative result (``None`` / ``False``);
    store failures propagate as ``DocumentStoreError``.
    """

    def __init__(
        self,
        article_repository: ArticleRepository,
        comment_repository: CommentRepository,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._articles = article_repository
        self._comments = comment_repository
        self._clock = clock

    def _timestamp(self) -> str:
        return self._clock().astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)

    async def list_articles(self) -> list[Article]:
        """All articles with their comments joined.

        No ordering is guaranteed for either articles or comments; both come
        back in whatever order the document store yields them.
        """
        articles = await self._articles.get_all()
        comment_lists = await asyncio.gather(
            *(self._comments.get_by_article(a.id) for a in articles)
        )
        return [a.with_comments(c) for a, c in zip(articles, comment_lists)]

    async def get_article(self, article_id: str) -> Article | None:
        article = await self._articles.get_by_id(article_id)
        if article is None:
            return None
        comments = await self._comments.get_by_article(article.id)
        return article.with_comments(comments)

    async def create_article(self, data: ArticleCreate, author_email: str) -> Article:
        """Persist a new article stamped with its author and publish time.

        Raises:
            DuplicateEntityError: If ``data.id`` names an existing article;
                the stored article is left untouched.
        """
        article = Article(
            title=data.title,
            content=data.content,
            author=author_email,
            published_date=self._timestamp(),
        )
        if data.id:
            article.id = data.id
        created = await self._articles.create(article)
        logger.info("Article %s created by %s", created.id, author_email)
        return created

    async def update_article(self, article_id: str, data: ArticleUpdate) -> bool:
        return await self._articles.update(article_id, title=data.title, content=data.content)

    async def delete_article(self, article_id: str) -> bool:
        deleted = await self._articles.delete(article_id)
        if deleted:
            logger.info("Article %s deleted", article_id)
        return deleted

    async def add_like(self, article_id: str) -> Article | None:
        """Increment an article's likes by one and return the stored result.

        This is a plain read-modify-write: two concurrent likes on the same
        article can both read N and both write N + 1. An atomic increment
        on the store side would close the gap.
        """
        article = await self._articles.get_by_id(article_id)
        if article is None:
            return None
        return await self._articles.save(article.liked())

    async def add_comment(
        self, article_id: str, data: CommentCreate, author_email: str
    ) -> Comment:
        """Attach a new comment to an existing article.

        Raises:
            EntityNotFoundError: If the article does not exist; nothing is
                persisted in that case.
        """
        if await self._articles.get_by_id(article_id) is None:
            raise EntityNotFoundError("Article", article_id)

        comment = Comment(
            content=data.content,
            article_id=article_id,
            author=author_email,
            timestamp=self._timestamp(),
        )
        created = await self._comments.create(comment)
        logger.info("Comment %s added to article %s by %s", created.id, article_id, author_email)
        return created

    async def list_comments(self, article_id: str) -> list[Comment]:
        return await self._comments.get_by_article(article_id)
