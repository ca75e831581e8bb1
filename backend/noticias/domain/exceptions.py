"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when an operation references an entity that does not exist."""

    def __init__(self, entity_type: str, entity_id: str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DocumentStoreError(Exception):
    """Raised when the document store cannot complete an operation.

    Distinct from "not found": a missing document is a normal ``None``
    result, this signals transport or database failure.
    """

    def __init__(self, operation: str, message: str):
        self.operation = operation
        self.message = message
        super().__init__(f"Document store {operation} failed: {message}")


class IdentityProviderError(Exception):
    """Raised when the identity provider is unreachable or answers badly.

    ``status_code`` is ``None`` when no HTTP response was received.
    """

    def __init__(self, status_code: int | None, message: str):
        self.status_code = status_code
        self.message = message
        prefix = f"{status_code}: " if status_code is not None else ""
        super().__init__(f"[identity-provider] {prefix}{message}")


class DuplicateEntityError(Exception):
    """Raised when attempting to create an entity whose key already exists."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")
