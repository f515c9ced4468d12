# =============================================================================
# app/auth/__init__.py - Authentication Module
# =============================================================================
# Provider configuration, sign-in callbacks and session JWT verification.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

from app.auth.dependencies import get_current_user, get_current_user_optional
from app.auth.models import AuthUser, SessionResponse
from app.auth.providers import configure_oauth_providers, validate_auth_config

__all__ = [
    "get_current_user",
    "get_current_user_optional",
    "AuthUser",
    "SessionResponse",
    "configure_oauth_providers",
    "validate_auth_config",
]
