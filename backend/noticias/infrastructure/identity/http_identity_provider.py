"""HTTP identity provider client — implements the IdentityProvider interface.

Talks to an external auth service over JSON/HTTP using httpx:

- ``POST {verify_path}``   body ``{"token": ...}`` → ``{"users": [{"email": ...}]}``
- ``POST {login_path}``    body ``{"email": ..., "password": ...}``
- ``POST {register_path}`` body ``{"email": ..., "password": ...}``
"""

import logging
from typing import Any

import httpx

from noticias.application.interfaces.identity_provider import IdentityProvider
from noticias.domain.entities import IdentityProviderResponse, IdentityUser
from noticias.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


class HttpIdentityProvider(IdentityProvider):
    """Infrastructure adapter — connects to the identity provider.

    Each call is attempted once and bounded by ``timeout`` seconds.
    """

    def __init__(
        self,
        base_url: str,
        *,
        verify_path: str = "/verify-token",
        login_path: str = "/login",
        register_path: str = "/register",
        timeout: float = 5.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        self._verify_path = verify_path
        self._login_path = login_path
        self._register_path = register_path
        self._timeout = timeout
        self._http_client = http_client

    def _url(self, path: str) -> str:
        return f"{self._base_url}/{path.lstrip('/')}"

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def _post(self, path: str, payload: dict[str, Any]) -> httpx.Response:
        url = self._url(path)
        client = await self._get_client()
        should_close = self._http_client is None

        try:
            return await client.post(url, json=payload, timeout=self._timeout)
        except httpx.TimeoutException as e:
            raise IdentityProviderError(None, f"Timed out after {self._timeout}s calling {url}") from e
        except httpx.HTTPError as e:
            raise IdentityProviderError(None, f"{type(e).__name__} calling {url}: {e}") from e
        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise IdentityProviderError(
                response.status_code, "Response body is not valid JSON"
            ) from e

    async def verify_token(self, token: str) -> list[IdentityUser]:
        response = await self._post(self._verify_path, {"token": token})

        if not response.is_success:
            raise IdentityProviderError(
                response.status_code, response.text[:200] or response.reason_phrase
            )

        data = self._json(response)
        users = data.get("users") if isinstance(data, dict) else None
        if not isinstance(users, list):
            raise IdentityProviderError(response.status_code, "Response has no 'users' list")

        # Only the first user authenticates the request; later records are informational
        result: list[IdentityUser] = []
        for index, user in enumerate(users):
            if not isinstance(user, dict) or not isinstance(user.get("email"), str):
                if index == 0:
                    raise IdentityProviderError(
                        response.status_code, "User record without an email"
                    )
                logger.warning("Skipping user record %d without an email", index)
                continue
            attributes = {k: v for k, v in user.items() if k != "email"}
            result.append(IdentityUser(email=user["email"], attributes=attributes))

        logger.debug("Token verified: %d user(s)", len(result))
        return result

    async def login(self, email: str, password: str) -> IdentityProviderResponse:
        response = await self._post(self._login_path, {"email": email, "password": password})
        logger.info("Login forwarded for %s → %d", email, response.status_code)
        return IdentityProviderResponse(response.status_code, self._json(response))

    async def register(self, email: str, password: str) -> IdentityProviderResponse:
        response = await self._post(self._register_path, {"email": email, "password": password})
        logger.info("Registration forwarded for %s → %d", email, response.status_code)
        return IdentityProviderResponse(response.status_code, self._json(response))
