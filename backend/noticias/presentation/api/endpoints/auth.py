"""Auth pass-through endpoints — login and registration at the identity provider."""

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import JSONResponse

from noticias.application.schemas import LoginCredentials, UserRegistrationRequest
from noticias.application.services import AuthService
from noticias.domain.exceptions import IdentityProviderError
from noticias.infrastructure.dependencies import get_auth_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/login")
async def login(
    credentials: LoginCredentials,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Log in at the identity provider; its status and body are returned as-is."""
    try:
        result = await service.login(credentials)
    except IdentityProviderError as e:
        logger.error("Login failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to log in",
        )
    return JSONResponse(status_code=result.status_code, content=result.body)


@router.post("/register")
async def register(
    request: UserRegistrationRequest,
    service: AuthService = Depends(get_auth_service),
) -> JSONResponse:
    """Register at the identity provider; its status and body are returned as-is."""
    try:
        result = await service.register(request)
    except IdentityProviderError as e:
        logger.error("Registration failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to register user",
        )
    return JSONResponse(status_code=result.status_code, content=result.body)
