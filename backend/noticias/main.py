"""FastAPI application factory."""

import inspect
import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

import httpx
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from noticias.config import get_settings
from noticias.infrastructure.firestore import FirestoreDocumentStore, create_firestore_client
from noticias.infrastructure.identity import HttpIdentityProvider
from noticias.infrastructure.logging.log_config import setup_logging
from noticias.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — build the collaborator clients, close them on shutdown."""
    settings = get_settings()
    setup_logging()

    # 1. Document store (Firestore)
    firestore_client = create_firestore_client(settings)
    app.state.document_store = FirestoreDocumentStore(
        firestore_client, timeout=settings.firestore_timeout
    )

    # 2. Identity provider (shared pooled HTTP client)
    http_client = httpx.AsyncClient(timeout=settings.identity_provider_timeout)
    app.state.identity_provider = HttpIdentityProvider(
        settings.identity_provider_url,
        verify_path=settings.identity_provider_verify_path,
        login_path=settings.identity_provider_login_path,
        register_path=settings.identity_provider_register_path,
        timeout=settings.identity_provider_timeout,
        http_client=http_client,
    )
    logger.info("Identity provider at %s", settings.identity_provider_url)

    try:
        yield
    finally:
        await http_client.aclose()
        # Async transports hand back a coroutine from close()
        closed = firestore_client.close()
        if inspect.isawaitable(closed):
            await closed
        logger.info("Collaborator clients closed")


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer malformed requests with 400 instead of FastAPI's default 422."""
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "noticias.main:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )
