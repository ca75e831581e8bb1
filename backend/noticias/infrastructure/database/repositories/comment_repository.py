"""Concrete comment repository backed by a DocumentStore."""

from noticias.application.interfaces import CommentRepository, Document, DocumentStore
from noticias.domain.entities import Comment


class DocumentCommentRepository(CommentRepository):
    """Implements the CommentRepository port on top of any DocumentStore."""

    def __init__(self, store: DocumentStore, collection: str = "comments"):
        self._store = store
        self._collection = collection

    @staticmethod
    def to_entity(document: Document) -> Comment:
        """Map stored document → domain entity."""
        return Comment(
            id=document.get("id", ""),
            article_id=document.get("articleId"),
            author=document.get("author"),
            content=document.get("content", ""),
            timestamp=document.get("timestamp"),
        )

    @staticmethod
    def to_document(entity: Comment) -> Document:
        """Map domain entity → stored document."""
        return {
            "id": entity.id,
            "articleId": entity.article_id,
            "author": entity.author,
            "content": entity.content,
            "timestamp": entity.timestamp,
        }

    async def create(self, comment: Comment) -> Comment:
        await self._store.create(self._collection, comment.id, self.to_document(comment))
        return comment

    async def get_by_article(self, article_id: str) -> list[Comment]:
        documents = await self._store.query(self._collection, "articleId", article_id)
        return [self.to_entity(doc) for doc in documents]
