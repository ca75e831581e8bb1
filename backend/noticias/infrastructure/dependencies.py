"""FastAPI dependency injection — wires infrastructure to application layer.

The long-lived collaborator clients (document store, identity provider)
are built once in the application lifespan and kept on ``app.state``;
everything else is assembled per request from them.
"""

from fastapi import Depends, HTTPException, Path, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from noticias.config import get_settings
from noticias.application.interfaces import DocumentStore, IdentityProvider
from noticias.application.services import ArticleService, AuthService
from noticias.domain.entities import AuthenticatedUser
from noticias.infrastructure.database.repositories import (
    DocumentArticleRepository,
    DocumentCommentRepository,
)

bearer_scheme = HTTPBearer(auto_error=False)


def get_document_store(request: Request) -> DocumentStore:
    """The DocumentStore created at startup."""
    return request.app.state.document_store


def get_identity_provider(request: Request) -> IdentityProvider:
    """The IdentityProvider created at startup."""
    return request.app.state.identity_provider


def get_article_service(
    store: DocumentStore = Depends(get_document_store),
) -> ArticleService:
    """Provides an ArticleService with both repositories wired up."""
    settings = get_settings()
    return ArticleService(
        DocumentArticleRepository(store, settings.articles_collection),
        DocumentCommentRepository(store, settings.comments_collection),
    )


def get_auth_service(
    provider: IdentityProvider = Depends(get_identity_provider),
) -> AuthService:
    """Provides an AuthService bound to the identity provider."""
    return AuthService(provider)


async def get_current_user_optional(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthenticatedUser | None:
    """Resolve the bearer token, if any. Never fails the request by itself."""
    if credentials is None:
        return None
    return await auth_service.resolve_identity(credentials.credentials)


async def get_current_user(
    user: AuthenticatedUser | None = Depends(get_current_user_optional),
) -> AuthenticatedUser:
    """Require a resolved identity — 401 otherwise.

    Usage:
        @router.post("")
        async def create(user: AuthenticatedUser = Depends(get_current_user)):
            ...
    """
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing or invalid bearer token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def article_id_path(article_id: str = Path(...)) -> str:
    """The ``{article_id}`` path parameter, rejected with 400 when blank."""
    article_id = article_id.strip()
    if not article_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Missing or malformed id",
        )
    return article_id
