"""Abstract identity provider interface — port for the external auth service."""

from abc import ABC, abstractmethod

from noticias.domain.entities import IdentityProviderResponse, IdentityUser


class IdentityProvider(ABC):
    """Port — defines what the application layer needs from the auth service."""

    @abstractmethod
    async def verify_token(self, token: str) -> list[IdentityUser]:
        """Look up the users associated with a bearer token.

        Args:
            token: The raw bearer token (without the ``Bearer`` prefix).

        Returns:
            The users the provider reports for the token; empty when the
            token is not recognised.

        Raises:
            IdentityProviderError: On transport errors, timeouts, non-2xx
                responses or malformed bodies.
        """
        ...

    @abstractmethod
    async def login(self, email: str, password: str) -> IdentityProviderResponse:
        """Forward a login request and return the provider's answer as-is.

        Raises:
            IdentityProviderError: If the provider cannot be reached or does
                not answer with JSON.
        """
        ...

    @abstractmethod
    async def register(self, email: str, password: str) -> IdentityProviderResponse:
        """Forward a registration request and return the provider's answer as-is.

        Raises:
            IdentityProviderError: If the provider cannot be reached or does
                not answer with JSON.
        """
        ...
