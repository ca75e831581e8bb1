from .article import ArticleCreate, ArticleUpdate, ArticleResponse, MessageResponse
from .comment import CommentCreate, CommentResponse
from .auth import LoginCredentials, UserRegistrationRequest

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "MessageResponse",
    "CommentCreate",
    "CommentResponse",
    "LoginCredentials",
    "UserRegistrationRequest",
]
