"""Unit tests for the HttpIdentityProvider."""

import json

import httpx
import pytest

from noticias.domain.exceptions import IdentityProviderError
from noticias.infrastructure.identity import HttpIdentityProvider


# ── Helpers ──


def _make_provider(handler, **kwargs) -> HttpIdentityProvider:
    return HttpIdentityProvider(
        "https://auth.test/api/",
        http_client=httpx.AsyncClient(transport=httpx.MockTransport(handler)),
        **kwargs,
    )


def _fixed(status_code: int = 200, json_data=None, content: bytes | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if content is not None:
            return httpx.Response(status_code, content=content)
        return httpx.Response(status_code, json=json_data)

    return handler


# ── verify_token ──


@pytest.mark.asyncio
async def test_verify_token_posts_token_and_parses_users():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200, json={"users": [{"email": "a@x.com", "localId": "u1"}]}
        )

    provider = _make_provider(handler)
    users = await provider.verify_token("tok-123")

    assert len(users) == 1
    assert users[0].email == "a@x.com"
    assert users[0].attributes == {"localId": "u1"}
    assert str(seen[0].url) == "https://auth.test/api/verify-token"
    assert json.loads(seen[0].content) == {"token": "tok-123"}


@pytest.mark.asyncio
async def test_verify_token_empty_users():
    provider = _make_provider(_fixed(json_data={"users": []}))
    assert await provider.verify_token("tok") == []


@pytest.mark.asyncio
async def test_verify_token_non_2xx_raises():
    provider = _make_provider(_fixed(401, json_data={"error": "INVALID_ID_TOKEN"}))

    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.verify_token("tok")

    assert exc_info.value.status_code == 401


@pytest.mark.asyncio
async def test_verify_token_malformed_body_raises():
    provider = _make_provider(_fixed(content=b"<html>oops</html>"))

    with pytest.raises(IdentityProviderError):
        await provider.verify_token("tok")


@pytest.mark.asyncio
async def test_verify_token_missing_users_raises():
    provider = _make_provider(_fixed(json_data={"kind": "lookup"}))

    with pytest.raises(IdentityProviderError):
        await provider.verify_token("tok")


@pytest.mark.asyncio
async def test_verify_token_first_user_without_email_raises():
    provider = _make_provider(
        _fixed(json_data={"users": [{"localId": "u1"}, {"email": "b@x.com"}]})
    )

    with pytest.raises(IdentityProviderError):
        await provider.verify_token("tok")


@pytest.mark.asyncio
async def test_verify_token_skips_later_users_without_email():
    provider = _make_provider(
        _fixed(
            json_data={
                "users": [
                    {"email": "a@x.com", "localId": "u1"},
                    {"localId": "u2"},
                    "not-a-record",
                    {"email": "c@x.com"},
                ]
            }
        )
    )

    users = await provider.verify_token("tok")

    assert [u.email for u in users] == ["a@x.com", "c@x.com"]


@pytest.mark.asyncio
async def test_verify_token_transport_error_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    provider = _make_provider(handler)

    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.verify_token("tok")

    assert exc_info.value.status_code is None


@pytest.mark.asyncio
async def test_verify_token_timeout_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("too slow", request=request)

    provider = _make_provider(handler, timeout=0.5)

    with pytest.raises(IdentityProviderError) as exc_info:
        await provider.verify_token("tok")

    assert "Timed out" in exc_info.value.message


# ── login / register ──


@pytest.mark.asyncio
async def test_login_passes_status_and_body_through():
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(400, json={"error": "INVALID_PASSWORD"})

    provider = _make_provider(handler, login_path="/sign-in")
    result = await provider.login("a@x.com", "wrong")

    assert result.status_code == 400
    assert result.body == {"error": "INVALID_PASSWORD"}
    assert seen[0].url.path == "/api/sign-in"
    assert json.loads(seen[0].content) == {"email": "a@x.com", "password": "wrong"}


@pytest.mark.asyncio
async def test_register_returns_provider_body():
    provider = _make_provider(_fixed(json_data={"idToken": "t", "email": "n@x.com"}))

    result = await provider.register("n@x.com", "secret123")

    assert result.status_code == 200
    assert result.body["email"] == "n@x.com"
