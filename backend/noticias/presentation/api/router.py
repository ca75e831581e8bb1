"""Top-level API router — aggregates all endpoint routers."""

from fastapi import APIRouter

from noticias.presentation.api.endpoints.health import router as health_router
from noticias.presentation.api.endpoints.articles import router as articles_router
from noticias.presentation.api.endpoints.auth import router as auth_router

router = APIRouter()
router.include_router(health_router)
router.include_router(articles_router)
router.include_router(auth_router)
