"""Article and comment endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from noticias.application.schemas import (
    ArticleCreate,
    ArticleResponse,
    ArticleUpdate,
    CommentCreate,
    CommentResponse,
    MessageResponse,
)
from noticias.application.services import ArticleService
from noticias.domain.entities import AuthenticatedUser
from noticias.domain.exceptions import (
    DocumentStoreError,
    DuplicateEntityError,
    EntityNotFoundError,
)
from noticias.infrastructure.dependencies import (
    article_id_path,
    get_article_service,
    get_current_user,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["Articles"])

ARTICLE_NOT_FOUND = "Article not found"


def _store_failure(message: str, error: DocumentStoreError) -> HTTPException:
    """Log the underlying store failure and build the generic 500 answer."""
    logger.error("%s: %s", message, error)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.get("", response_model=list[ArticleResponse])
async def list_articles(
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Retrieve every article with its comments. Order is not guaranteed."""
    try:
        articles = await service.list_articles()
    except DocumentStoreError as e:
        raise _store_failure("Failed to fetch articles", e)
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    user: AuthenticatedUser = Depends(get_current_user),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article authored by the caller. An existing id is a 409."""
    try:
        article = await service.create_article(data, author_email=user.email)
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except DocumentStoreError as e:
        raise _store_failure("Failed to create article", e)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str = Depends(article_id_path),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article, with its comments, by ID."""
    try:
        article = await service.get_article(article_id)
    except DocumentStoreError as e:
        raise _store_failure("Failed to fetch article", e)
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put(
    "/{article_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_user)],
)
async def update_article(
    data: ArticleUpdate,
    article_id: str = Depends(article_id_path),
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Update the title and content of an existing article."""
    try:
        updated = await service.update_article(article_id, data)
    except DocumentStoreError as e:
        raise _store_failure("Failed to update article", e)
    if not updated:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)
    return MessageResponse(message="Article updated successfully")


@router.delete(
    "/{article_id}",
    response_model=MessageResponse,
    dependencies=[Depends(get_current_user)],
)
async def delete_article(
    article_id: str = Depends(article_id_path),
    service: ArticleService = Depends(get_article_service),
) -> MessageResponse:
    """Delete an article by ID."""
    try:
        deleted = await service.delete_article(article_id)
    except DocumentStoreError as e:
        raise _store_failure("Failed to delete article", e)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)
    return MessageResponse(message="Article deleted")


@router.post(
    "/{article_id}/comments",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    data: CommentCreate,
    article_id: str = Depends(article_id_path),
    user: AuthenticatedUser = Depends(get_current_user),
    service: ArticleService = Depends(get_article_service),
) -> CommentResponse:
    """Add a comment, authored by the caller, to an existing article."""
    try:
        comment = await service.add_comment(article_id, data, author_email=user.email)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DocumentStoreError as e:
        raise _store_failure("Failed to add comment", e)
    return CommentResponse.model_validate(comment, from_attributes=True)


@router.get("/{article_id}/comments", response_model=list[CommentResponse])
async def list_comments(
    article_id: str = Depends(article_id_path),
    service: ArticleService = Depends(get_article_service),
) -> list[CommentResponse]:
    """Retrieve the comments of an article. Unknown articles yield an empty list."""
    try:
        comments = await service.list_comments(article_id)
    except DocumentStoreError as e:
        raise _store_failure("Failed to fetch comments", e)
    return [CommentResponse.model_validate(c, from_attributes=True) for c in comments]


@router.post("/{article_id}/like", response_model=ArticleResponse)
async def like_article(
    article_id: str = Depends(article_id_path),
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Add one like to an article. Open to anonymous readers."""
    try:
        article = await service.add_like(article_id)
    except DocumentStoreError as e:
        raise _store_failure("Failed to like article", e)
    if article is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=ARTICLE_NOT_FOUND)
    return ArticleResponse.model_validate(article, from_attributes=True)
