"""Concrete article repository backed by a DocumentStore."""

from typing import Any

from noticias.application.interfaces import ArticleRepository, Document, DocumentStore
from noticias.domain.entities import Article
from noticias.domain.exceptions import DuplicateEntityError


class DocumentArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on top of any DocumentStore."""

    def __init__(self, store: DocumentStore, collection: str = "articles"):
        self._store = store
        self._collection = collection

    @staticmethod
    def to_entity(doc_id: str, document: Document) -> Article:
        """Map stored document → domain entity."""
        likes: Any = document.get("likes")
        return Article(
            id=document.get("id") or doc_id,
            title=document.get("title", ""),
            content=document.get("content", ""),
            author=document.get("author"),
            published_date=document.get("publishedDate"),
            likes=int(likes) if likes is not None else 0,
        )

    @staticmethod
    def to_document(entity: Article) -> Document:
        """Map domain entity → stored document. Comments are never embedded."""
        return {
            "id": entity.id,
            "title": entity.title,
            "content": entity.content,
            "author": entity.author,
            "publishedDate": entity.published_date,
            "likes": entity.likes,
        }

    async def get_by_id(self, article_id: str) -> Article | None:
        document = await self._store.get(self._collection, article_id)
        return self.to_entity(article_id, document) if document is not None else None

    async def get_all(self) -> list[Article]:
        documents = await self._store.get_all(self._collection)
        return [self.to_entity(doc.get("id", ""), doc) for doc in documents]

    async def create(self, article: Article) -> Article:
        try:
            await self._store.create(self._collection, article.id, self.to_document(article))
        except DuplicateEntityError as e:
            raise DuplicateEntityError("Article", "id", article.id) from e
        return article

    async def update(self, article_id: str, title: str, content: str) -> bool:
        return await self._store.update(
            self._collection, article_id, {"title": title, "content": content}
        )

    async def save(self, article: Article) -> Article:
        await self._store.set(self._collection, article.id, self.to_document(article))
        return article

    async def delete(self, article_id: str) -> bool:
        if await self._store.get(self._collection, article_id) is None:
            return False
        await self._store.delete(self._collection, article_id)
        return True
