"""Firestore adapter — implements the DocumentStore port.

Wraps an injected ``google.cloud.firestore.AsyncClient``. Every call is
bounded by a timeout and issued with ``retry=None``: a failed call is
reported once, as ``DocumentStoreError``, and never retried.
"""

import logging
from collections.abc import AsyncIterator
from typing import Any

from google.api_core import exceptions as google_exceptions
from google.cloud import firestore
from google.cloud.firestore_v1.base_query import FieldFilter

from noticias.application.interfaces.document_store import Document, DocumentStore
from noticias.domain.exceptions import DocumentStoreError, DuplicateEntityError

logger = logging.getLogger(__name__)


class FirestoreDocumentStore(DocumentStore):
    """Infrastructure adapter — talks to Cloud Firestore with native async calls."""

    def __init__(self, client: firestore.AsyncClient, timeout: float = 10.0):
        self._client = client
        self._timeout = timeout

    @property
    def _call_options(self) -> dict[str, Any]:
        return {"retry": None, "timeout": self._timeout}

    @staticmethod
    def _to_document(snapshot: Any) -> Document:
        data = snapshot.to_dict() or {}
        data.setdefault("id", snapshot.id)
        return data

    async def _collect(self, operation: str, snapshots: AsyncIterator[Any]) -> list[Document]:
        try:
            return [self._to_document(s) async for s in snapshots]
        except google_exceptions.GoogleAPIError as e:
            raise self._wrap(operation, e) from e

    @staticmethod
    def _wrap(operation: str, error: Exception) -> DocumentStoreError:
        logger.error("Firestore %s failed: %s: %s", operation, type(error).__name__, error)
        return DocumentStoreError(operation, str(error) or type(error).__name__)

    async def get(self, collection: str, doc_id: str) -> Document | None:
        ref = self._client.collection(collection).document(doc_id)
        try:
            snapshot = await ref.get(**self._call_options)
        except google_exceptions.GoogleAPIError as e:
            raise self._wrap("get", e) from e
        return self._to_document(snapshot) if snapshot.exists else None

    async def get_all(self, collection: str) -> list[Document]:
        stream = self._client.collection(collection).stream(**self._call_options)
        return await self._collect("get_all", stream)

    async def query(self, collection: str, field: str, value: Any) -> list[Document]:
        query = self._client.collection(collection).where(filter=FieldFilter(field, "==", value))
        return await self._collect("query", query.stream(**self._call_options))

    async def create(self, collection: str, doc_id: str, data: Document) -> None:
        ref = self._client.collection(collection).document(doc_id)
        try:
            await ref.create(data, **self._call_options)
        except google_exceptions.AlreadyExists as e:
            raise DuplicateEntityError(collection, "id", doc_id) from e
        except google_exceptions.GoogleAPIError as e:
            raise self._wrap("create", e) from e

    async def set(self, collection: str, doc_id: str, data: Document) -> None:
        ref = self._client.collection(collection).document(doc_id)
        try:
            await ref.set(data, **self._call_options)
        except google_exceptions.GoogleAPIError as e:
            raise self._wrap("set", e) from e

    async def update(self, collection: str, doc_id: str, fields: Document) -> bool:
        ref = self._client.collection(collection).document(doc_id)
        try:
            await ref.update(fields, **self._call_options)
        except google_exceptions.NotFound:
            return False
        except google_exceptions.GoogleAPIError as e:
            raise self._wrap("update", e) from e
        return True

    async def delete(self, collection: str, doc_id: str) -> None:
        ref = self._client.collection(collection).document(doc_id)
        try:
            await ref.delete(**self._call_options)
        except google_exceptions.GoogleAPIError as e:
            raise self._wrap("delete", e) from e
