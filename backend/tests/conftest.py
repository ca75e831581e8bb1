"""Shared fakes and fixtures for unit and integration tests."""

import copy
from datetime import datetime, timezone
from typing import Any

import pytest

from noticias.application.interfaces import DocumentStore, IdentityProvider
from noticias.application.services import ArticleService, AuthService
from noticias.domain.entities import IdentityProviderResponse, IdentityUser
from noticias.domain.exceptions import (
    DocumentStoreError,
    DuplicateEntityError,
    IdentityProviderError,
)
from noticias.infrastructure.database.repositories import (
    DocumentArticleRepository,
    DocumentCommentRepository,
)

FIXED_NOW = datetime(2024, 3, 9, 14, 30, 5, tzinfo=timezone.utc)


# ── Fakes ────────────────────────────────────────────────────────────


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed document store. Documents are deep-copied in and out."""

    def __init__(self):
        self.collections: dict[str, dict[str, dict[str, Any]]] = {}
        self.fail_with: DocumentStoreError | None = None

    def _collection(self, name: str) -> dict[str, dict[str, Any]]:
        if self.fail_with is not None:
            raise self.fail_with
        return self.collections.setdefault(name, {})

    async def get(self, collection, doc_id):
        document = self._collection(collection).get(doc_id)
        return copy.deepcopy(document) if document is not None else None

    async def get_all(self, collection):
        return [copy.deepcopy(d) for d in self._collection(collection).values()]

    async def query(self, collection, field, value):
        return [
            copy.deepcopy(d)
            for d in self._collection(collection).values()
            if d.get(field) == value
        ]

    async def create(self, collection, doc_id, data):
        documents = self._collection(collection)
        if doc_id in documents:
            raise DuplicateEntityError(collection, "id", doc_id)
        documents[doc_id] = copy.deepcopy(data)

    async def set(self, collection, doc_id, data):
        self._collection(collection)[doc_id] = copy.deepcopy(data)

    async def update(self, collection, doc_id, fields):
        documents = self._collection(collection)
        if doc_id not in documents:
            return False
        documents[doc_id].update(copy.deepcopy(fields))
        return True

    async def delete(self, collection, doc_id):
        self._collection(collection).pop(doc_id, None)


class FakeIdentityProvider(IdentityProvider):
    """Maps known tokens to user emails; records forwarded credentials."""

    def __init__(self, tokens: dict[str, list[str]] | None = None):
        self.tokens = tokens or {}
        self.error: IdentityProviderError | None = None
        self.verified: list[str] = []
        self.forwarded: list[tuple[str, str]] = []

    async def verify_token(self, token):
        self.verified.append(token)
        if self.error is not None:
            raise self.error
        return [IdentityUser(email=e) for e in self.tokens.get(token, [])]

    async def login(self, email, password):
        if self.error is not None:
            raise self.error
        self.forwarded.append(("login", email))
        if password != "correct-horse":
            return IdentityProviderResponse(400, {"error": "INVALID_PASSWORD"})
        return IdentityProviderResponse(200, {"idToken": "valid-token", "email": email})

    async def register(self, email, password):
        if self.error is not None:
            raise self.error
        self.forwarded.append(("register", email))
        return IdentityProviderResponse(200, {"idToken": "new-token", "email": email})


# ── Fixtures ─────────────────────────────────────────────────────────


@pytest.fixture
def store() -> InMemoryDocumentStore:
    return InMemoryDocumentStore()


@pytest.fixture
def identity_provider() -> FakeIdentityProvider:
    return FakeIdentityProvider(
        {
            "valid-token": ["a@x.com"],
            "shared-token": ["first@x.com", "second@x.com"],
            "empty-token": [],
            "other-token": ["mallory@x.com"],
        }
    )


@pytest.fixture
def article_service(store: InMemoryDocumentStore) -> ArticleService:
    return ArticleService(
        DocumentArticleRepository(store),
        DocumentCommentRepository(store),
        clock=lambda: FIXED_NOW,
    )


@pytest.fixture
def auth_service(identity_provider: FakeIdentityProvider) -> AuthService:
    return AuthService(identity_provider)


@pytest.fixture
def api_app(store: InMemoryDocumentStore, identity_provider: FakeIdentityProvider):
    """A fresh application wired to the in-memory collaborators."""
    from noticias.main import create_app
    from noticias.infrastructure.dependencies import get_document_store, get_identity_provider

    app = create_app()
    app.dependency_overrides[get_document_store] = lambda: store
    app.dependency_overrides[get_identity_provider] = lambda: identity_provider
    return app
