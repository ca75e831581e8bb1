"""Unit tests for the AuthService token resolution."""

import pytest

from noticias.application.services import AuthService
from noticias.domain.entities import AuthenticatedUser
from noticias.domain.exceptions import IdentityProviderError


@pytest.mark.asyncio
async def test_resolve_identity_returns_email(auth_service: AuthService):
    assert await auth_service.resolve_identity("valid-token") == AuthenticatedUser("a@x.com")


@pytest.mark.asyncio
async def test_resolve_identity_uses_first_user(auth_service: AuthService):
    user = await auth_service.resolve_identity("shared-token")
    assert user.email == "first@x.com"


@pytest.mark.asyncio
async def test_resolve_identity_empty_users(auth_service: AuthService):
    assert await auth_service.resolve_identity("empty-token") is None


@pytest.mark.asyncio
async def test_resolve_identity_unknown_token(auth_service: AuthService):
    assert await auth_service.resolve_identity("nope") is None


@pytest.mark.asyncio
async def test_resolve_identity_swallows_provider_errors(
    auth_service: AuthService, identity_provider
):
    identity_provider.error = IdentityProviderError(None, "connection refused")

    assert await auth_service.resolve_identity("valid-token") is None


@pytest.mark.asyncio
async def test_resolve_identity_skips_blank_token(auth_service: AuthService, identity_provider):
    assert await auth_service.resolve_identity("") is None
    assert identity_provider.verified == []
