"""Pydantic DTOs for the auth pass-through endpoints."""

from pydantic import BaseModel, Field


class LoginCredentials(BaseModel):
    """Email/password pair forwarded to the identity provider's login endpoint."""

    email: str = Field(..., min_length=3, examples=["reader@example.com"])
    password: str = Field(..., min_length=1)


class UserRegistrationRequest(BaseModel):
    """Email/password pair forwarded to the identity provider's register endpoint."""

    email: str = Field(..., min_length=3, examples=["reader@example.com"])
    password: str = Field(..., min_length=6)
