# =============================================================================
# app/auth/callbacks.py - Auth Library Callbacks
# =============================================================================
# Hooks called by the external auth library during sign-in, token refresh
# and session building. Records are passed as plain dicts; only the
# "email", "id", "provider", "sub" and "userId" keys are read.
#
# Sign-in policy:
#   - OAuth identities are verified by the provider, so OAuth sign-in is
#     allowed even when the user table cannot be checked.
#   - Credentials sign-in needs a positive database match. Any failure to
#     check (no database, lookup error, no such user) denies it.
# =============================================================================

from __future__ import annotations

import logging
from typing import Any, Callable, Mapping

from lib.env import SettingsStore, is_setting_present
from lib.errors import ErrorKind, create_app_error, log_error

logger = logging.getLogger(__name__)

CREDENTIALS_PROVIDER = "credentials"

# Settings the user lookup needs
DATABASE_SETTINGS: tuple[str, ...] = ("SUPABASE_URL", "SUPABASE_SERVICE_KEY")

UserLookup = Callable[[str], "Mapping[str, Any] | None"]


def _provider_of(account: Mapping[str, Any] | None) -> str | None:
    return (account or {}).get("provider")


def is_credentials_provider(account: Mapping[str, Any] | None) -> bool:
    """Check if the account signs in with username/password."""
    return _provider_of(account) == CREDENTIALS_PROVIDER


def is_database_available(env: SettingsStore | None = None) -> bool:
    """Check if the settings for the user lookup are present."""
    return all(is_setting_present(name, env) for name in DATABASE_SETTINGS)


def _default_lookup(email: str) -> Mapping[str, Any] | None:
    from lib.supabase_client import SupabaseClient

    return SupabaseClient.fetch_user_by_email(email)


def sign_in(
    user: Mapping[str, Any] | None,
    account: Mapping[str, Any] | None,
    lookup: UserLookup | None = None,
    env: SettingsStore | None = None,
) -> bool:
    """
    Decide whether a sign-in attempt may proceed.

    Args:
        user: User record from the auth library
        account: Account record, carries the "provider" id
        lookup: Finds a user row by email (defaults to Supabase)
        env: Settings store (defaults to os.environ)

    Returns:
        True to allow the sign-in, False to refuse it
    """
    allow_unverified = not is_credentials_provider(account)
    email = (user or {}).get("email")

    if not email:
        logger.warning(f"Sign-in attempt without email (provider={_provider_of(account)})")
        return allow_unverified

    if not is_database_available(env):
        logger.warning("Database is not configured, skipping sign-in validation")
        return allow_unverified

    lookup = lookup or _default_lookup
    try:
        found = lookup(email)
    except Exception as e:
        log_error(
            create_app_error(
                "User lookup failed during sign-in",
                ErrorKind.DATABASE,
                "SIGNIN_LOOKUP_FAILED",
                cause=e,
            ),
            "Sign In",
        )
        return allow_unverified

    if found:
        return True

    logger.info(f"No user found for sign-in (provider={_provider_of(account)})")
    return allow_unverified


def jwt(
    token: dict[str, Any],
    user: Mapping[str, Any] | None = None,
    account: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Enrich token claims with the user id and provider.

    Returns a new dict; the input token is not modified.
    """
    token = dict(token)
    if user and user.get("id"):
        token["userId"] = str(user["id"])
    if not token.get("userId") and token.get("sub"):
        token["userId"] = token["sub"]
    if token.get("userId") is not None:
        token["userId"] = str(token["userId"])
    # Refreshes carry no account; keep the provider stamped at sign-in
    token["provider"] = _provider_of(account) or token.get("provider") or CREDENTIALS_PROVIDER
    return token


def session(session: dict[str, Any], token: Mapping[str, Any] | None) -> dict[str, Any]:
    """Copy the user id and provider from the token onto the session user."""
    session = dict(session)
    user = session.get("user")
    if token and user is not None:
        user = dict(user)
        if token.get("userId"):
            user["id"] = token["userId"]
        user["provider"] = token.get("provider") or CREDENTIALS_PROVIDER
        session["user"] = user
    return session


def authorized(auth: Mapping[str, Any] | None) -> bool:
    """A request is authorized when it carries a session user."""
    return bool(auth) and auth.get("user") is not None
