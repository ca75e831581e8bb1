from .client import create_firestore_client
from .document_store import FirestoreDocumentStore

__all__ = [
    "create_firestore_client",
    "FirestoreDocumentStore",
]
