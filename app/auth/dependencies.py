# =============================================================================
# app/auth/dependencies.py - FastAPI Auth Dependencies
# =============================================================================
# Provides dependency injection for authentication.
#
# Session tokens are HS256 JWTs signed with NEXTAUTH_SECRET, the same
# secret the auth library uses. Claims are passed through the jwt and
# session callbacks so API users look exactly like library sessions.
#
# Usage:
#   from app.auth import get_current_user, AuthUser
#
#   @router.get("/protected")
#   async def protected(user: AuthUser = Depends(get_current_user)):
#       return {"user_id": user.id}
# =============================================================================

import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import jwt, JWTError, ExpiredSignatureError
from pydantic import ValidationError

from app.auth import callbacks
from app.auth.errors import friendly_message
from app.auth.models import AuthUser
from lib.env import get_env_variable
from lib.errors import ConfigError

logger = logging.getLogger(__name__)

# HTTP Bearer token extractor
security = HTTPBearer()
security_optional = HTTPBearer(auto_error=False)

JWT_ALGORITHM = "HS256"


def _get_signing_secret() -> str:
    """Get the session signing secret, or fail with 503."""
    try:
        return get_env_variable("NEXTAUTH_SECRET")
    except ConfigError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            # Already logged by get_env_variable
            detail=friendly_message(e.message),
        )


def decode_session_token(token: str, secret: str) -> dict:
    """
    Verify a session JWT and return its claims after the jwt callback.

    Raises:
        JWTError: If the signature, expiry or structure is invalid
    """
    claims = jwt.decode(token, secret, algorithms=[JWT_ALGORITHM])
    return callbacks.jwt(claims)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security)
) -> AuthUser:
    """
    Extract and validate the user from a session JWT.

    Returns:
        AuthUser: The authenticated user

    Raises:
        HTTPException: 401 if the token is invalid or expired,
            503 if no signing secret is configured
    """
    secret = _get_signing_secret()

    try:
        claims = decode_session_token(credentials.credentials, secret)
    except ExpiredSignatureError:
        logger.warning("JWT token has expired")
        raise _unauthorized("Token has expired")
    except JWTError as e:
        logger.warning(f"JWT validation failed: {e}")
        raise _unauthorized(f"Invalid token: {str(e)}")

    session = callbacks.session(
        {"user": {"email": claims.get("email"), "name": claims.get("name")}},
        claims,
    )
    if not callbacks.authorized(session) or not session["user"].get("id"):
        logger.warning("JWT token missing user id")
        raise _unauthorized("Invalid token: missing user ID")

    try:
        user = AuthUser(**session["user"])
    except ValidationError as e:
        logger.warning(f"JWT claims have invalid types: {e.error_count()} error(s)")
        raise _unauthorized("Invalid token: malformed claims")

    logger.debug(f"Authenticated user: {user.id}")
    return user


async def get_current_user_optional(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_optional)
) -> Optional[AuthUser]:
    """
    Optionally get the current user from a session JWT.

    Returns None if no token is provided or it is invalid, instead of
    raising an error.
    """
    if credentials is None:
        return None

    try:
        return await get_current_user(credentials)
    except HTTPException:
        return None
