from .article_repository import DocumentArticleRepository
from .comment_repository import DocumentCommentRepository

__all__ = [
    "DocumentArticleRepository",
    "DocumentCommentRepository",
]
