from .article import Article
from .comment import Comment
from .identity import AuthenticatedUser, IdentityProviderResponse, IdentityUser

__all__ = [
    "Article",
    "Comment",
    "AuthenticatedUser",
    "IdentityProviderResponse",
    "IdentityUser",
]
