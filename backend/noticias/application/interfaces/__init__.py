from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .document_store import Document, DocumentStore
from .identity_provider import IdentityProvider

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "Document",
    "DocumentStore",
    "IdentityProvider",
]
