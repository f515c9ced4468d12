# =============================================================================
# app/auth/models.py - Authentication Models
# =============================================================================
# Pydantic models for authentication data.
# =============================================================================

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthUser(BaseModel):
    """
    Authenticated user extracted from a session JWT.

    This is the minimal user info available from the token itself,
    without querying the database.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    email: Optional[str] = None
    name: Optional[str] = None
    provider: str = "credentials"


class SessionResponse(BaseModel):
    """Session payload returned to the front-end."""
    user: AuthUser


class ProviderInfo(BaseModel):
    """Public view of an enabled provider. Never carries secrets."""
    id: str


class ProvidersResponse(BaseModel):
    providers: list[ProviderInfo]


class SignInRequest(BaseModel):
    """
    Sign-in callback payload sent by the auth library.

    Example:
        {
            "user": {"email": "jane@example.com"},
            "account": {"provider": "google"}
        }
    """
    user: dict[str, Any] = Field(default_factory=dict)
    account: Optional[dict[str, Any]] = None


class SignInResponse(BaseModel):
    allowed: bool


class AuthErrorRequest(BaseModel):
    message: str = Field(..., description="Raw error text from the auth library")


class AuthErrorResponse(BaseModel):
    error: str
