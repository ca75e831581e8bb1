"""Abstract document store interface — port for the remote document database.

Documents are plain JSON-like dicts grouped into named collections and
keyed by string ID. Implementations raise ``DocumentStoreError`` on any
transport or database failure; a missing document is never an error.
"""

from abc import ABC, abstractmethod
from typing import Any

Document = dict[str, Any]


class DocumentStore(ABC):
    """Port — defines what repositories need from a document database."""

    @abstractmethod
    async def get(self, collection: str, doc_id: str) -> Document | None:
        """Fetch one document, or None if it does not exist."""
        ...

    @abstractmethod
    async def get_all(self, collection: str) -> list[Document]:
        """Fetch every document in a collection, in store order."""
        ...

    @abstractmethod
    async def query(self, collection: str, field: str, value: Any) -> list[Document]:
        """Fetch the documents whose ``field`` equals ``value``."""
        ...

    @abstractmethod
    async def create(self, collection: str, doc_id: str, data: Document) -> None:
        """Create a document, never overwriting.

        Raises:
            DuplicateEntityError: If a document with ``doc_id`` already exists.
        """
        ...

    @abstractmethod
    async def set(self, collection: str, doc_id: str, data: Document) -> None:
        """Create or fully overwrite a document."""
        ...

    @abstractmethod
    async def update(self, collection: str, doc_id: str, fields: Document) -> bool:
        """Overwrite only the given fields of an existing document.

        Returns False, writing nothing, when the document does not exist.
        """
        ...

    @abstractmethod
    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete a document. Deleting a missing document is a no-op."""
        ...
