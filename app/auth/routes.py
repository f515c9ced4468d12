# =============================================================================
# app/auth/routes.py - Authentication Routes
# =============================================================================
# API endpoints for authentication-related operations.
#
# Note: The OAuth handshake itself is handled by the external auth library.
# These routes expose provider configuration to it, answer its sign-in
# callback, and report session info after authentication.
# =============================================================================

import logging

from fastapi import APIRouter, Depends, Request

from app.auth import callbacks
from app.auth.dependencies import get_current_user
from app.auth.errors import handle_auth_error
from app.auth.models import (
    AuthErrorRequest,
    AuthErrorResponse,
    AuthUser,
    ProviderInfo,
    ProvidersResponse,
    SessionResponse,
    SignInRequest,
    SignInResponse,
)
from app.auth.providers import configure_oauth_providers

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/providers", response_model=ProvidersResponse)
async def list_providers(request: Request) -> ProvidersResponse:
    """
    List the enabled OAuth providers.

    Uses the list built at startup; only provider ids are returned.
    """
    providers = getattr(request.app.state, "oauth_providers", None)
    if providers is None:
        providers = configure_oauth_providers()
    return ProvidersResponse(providers=[ProviderInfo(id=p.id) for p in providers])


@router.post("/callback/signin", response_model=SignInResponse)
async def sign_in_callback(payload: SignInRequest) -> SignInResponse:
    """
    Sign-in callback for the auth library.

    OAuth sign-ins are allowed unless refused outright; credentials
    sign-ins require a matching user in the database.
    """
    allowed = callbacks.sign_in(payload.user, payload.account)
    logger.info(
        f"Sign-in {'allowed' if allowed else 'refused'} "
        f"(provider={(payload.account or {}).get('provider')})"
    )
    return SignInResponse(allowed=allowed)


@router.get("/session", response_model=SessionResponse)
async def get_session(
    user: AuthUser = Depends(get_current_user)
) -> SessionResponse:
    """
    Get the current session.

    Raises:
        401: If not authenticated
    """
    return SessionResponse(user=user)


@router.post("/error", response_model=AuthErrorResponse)
async def describe_auth_error(payload: AuthErrorRequest) -> AuthErrorResponse:
    """
    Turn a raw auth error into a message that is safe to show a user.
    """
    return AuthErrorResponse(**handle_auth_error(RuntimeError(payload.message)))
