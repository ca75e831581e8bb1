"""Application service for bearer-token authentication and auth pass-through."""

import logging

from noticias.application.interfaces import IdentityProvider
from noticias.application.schemas import LoginCredentials, UserRegistrationRequest
from noticias.domain.entities import AuthenticatedUser, IdentityProviderResponse
from noticias.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


class AuthService:
    """Resolves bearer tokens to identities via the external identity provider."""

    def __init__(self, identity_provider: IdentityProvider):
        self._provider = identity_provider

    async def resolve_identity(self, token: str) -> AuthenticatedUser | None:
        """Verify a token and return the first reported user's identity.

        Never raises: an unknown token, an empty user list or any provider
        failure all yield ``None`` so that gated routes fail closed.
        """
        if not token:
            return None

        try:
            users = await self._provider.verify_token(token)
        except IdentityProviderError as e:
            logger.warning("Token verification failed: %s", e)
            return None

        if not users:
            logger.info("Token verification returned no users")
            return None

        return AuthenticatedUser(email=users[0].email)

    async def login(self, credentials: LoginCredentials) -> IdentityProviderResponse:
        return await self._provider.login(credentials.email, credentials.password)

    async def register(self, request: UserRegistrationRequest) -> IdentityProviderResponse:
        return await self._provider.register(request.email, request.password)
