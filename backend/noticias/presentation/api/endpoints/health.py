"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from noticias.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Report the service status and which collaborators it is configured for.

    Nothing is contacted; the Firestore project is ``None`` when it is
    resolved from application default credentials.
    """
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "firestore": {
            "project": settings.firestore_project_id or None,
            "database": settings.firestore_database,
            "collections": [settings.articles_collection, settings.comments_collection],
        },
        "identityProvider": settings.identity_provider_url,
    }
