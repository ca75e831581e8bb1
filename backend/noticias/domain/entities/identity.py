"""Identity entities — users as reported by the external identity provider."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class IdentityUser:
    """A user record returned by the identity provider's token lookup."""

    email: str
    attributes: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class AuthenticatedUser:
    """The resolved identity bound to a single request."""

    email: str


@dataclass
class IdentityProviderResponse:
    """Status and JSON body of a pass-through call (login, register)."""

    status_code: int
    body: Any
