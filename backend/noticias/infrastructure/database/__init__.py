from .repositories import DocumentArticleRepository, DocumentCommentRepository

__all__ = [
    "DocumentArticleRepository",
    "DocumentCommentRepository",
]
