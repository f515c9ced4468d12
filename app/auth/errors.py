# =============================================================================
# app/auth/errors.py - User-Facing Auth Error Messages
# =============================================================================
# Maps low-level auth failures to messages safe to show a user.
# Patterns are checked in order and the first match wins, so more specific
# patterns must come before broader ones.
# =============================================================================

from __future__ import annotations

import re
from typing import Any, Sequence

from lib.errors import log_error

UNKNOWN_AUTH_ERROR = "An unknown authentication error occurred."

AUTH_ERROR_MESSAGES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"GOOGLE_CLIENT_ID", re.IGNORECASE),
     "Google authentication is not properly configured"),
    (re.compile(r"GITHUB_CLIENT_ID", re.IGNORECASE),
     "GitHub authentication is not properly configured"),
    (re.compile(r"FACEBOOK_CLIENT_ID", re.IGNORECASE),
     "Facebook authentication is not properly configured"),
    (re.compile(r"MICROSOFT_CLIENT_ID", re.IGNORECASE),
     "Microsoft authentication is not properly configured"),
    (re.compile(r"SUPABASE", re.IGNORECASE),
     "Supabase authentication is not properly configured"),
    (re.compile(r"NEXTAUTH", re.IGNORECASE),
     "NextAuth is not properly configured"),
)


def friendly_message(
    message: str,
    patterns: Sequence[tuple[re.Pattern[str], str]] = AUTH_ERROR_MESSAGES,
) -> str:
    """Return the first matching friendly message, or the message itself."""
    for pattern, friendly in patterns:
        if pattern.search(message):
            return friendly
    return message


def handle_auth_error(
    error: Any,
    patterns: Sequence[tuple[re.Pattern[str], str]] = AUTH_ERROR_MESSAGES,
) -> dict[str, str]:
    """
    Convert an auth failure into a response payload.

    Args:
        error: An exception, a plain message string, or anything else
        patterns: Ordered (pattern, message) pairs

    Returns:
        {"error": message}. Exceptions are mapped through the pattern table
        and logged; strings pass through unchanged; any other value yields
        a generic message.
    """
    if isinstance(error, BaseException):
        log_error(error, "Authentication")
        message = getattr(error, "message", None)
        if not isinstance(message, str) or not message:
            message = str(error)
        return {"error": friendly_message(message, patterns)}

    if isinstance(error, str):
        return {"error": error}

    return {"error": UNKNOWN_AUTH_ERROR}
