# =============================================================================
# lib/errors.py - Error Taxonomy and Logging
# =============================================================================
# A small, flat error taxonomy used to classify failures before they are
# logged. Three shapes can be logged:
#
#   AppError       -> "[KIND] [context]: message" (+ code, + cause)
#   BaseException  -> "[ERROR] [context]: message" (+ traceback)
#   anything else  -> "[UNKNOWN ERROR] [context]: value"
#
# The three prefixes are parsed by downstream log tooling; keep them stable.
#
# Usage:
#   from lib.errors import create_app_error, log_error, ErrorKind
#   log_error(create_app_error("DB down", ErrorKind.DATABASE), "Sign In")
# =============================================================================

from __future__ import annotations

import logging
import traceback
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

DEFAULT_ERROR_MESSAGE = "An unknown error occurred"


class ErrorKind(str, Enum):
    """
    Coarse failure categories.

    Used only for log classification and routing decisions, never for
    control flow inside the error itself.
    """
    AUTH = "auth"
    CONFIG = "config"
    DATABASE = "database"
    NETWORK = "network"
    VALIDATION = "validation"
    UNKNOWN = "unknown"


class AppError(BaseModel):
    """
    Classified error record.

    This is a value, not an exception: it is built, logged and dropped.
    Wrap it in ConfigError (or another ApplicationError) to raise it.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    message: str = Field(..., min_length=1)
    kind: ErrorKind = ErrorKind.UNKNOWN
    code: str | None = None
    cause: Any = None


def create_app_error(
    message: str,
    kind: ErrorKind = ErrorKind.UNKNOWN,
    code: str | None = None,
    cause: Any = None,
) -> AppError:
    """
    Build an AppError. Never raises.

    Blank messages are replaced with a generic one so every AppError has
    something to print.
    """
    if not isinstance(message, str) or not message.strip():
        message = DEFAULT_ERROR_MESSAGE
    if not isinstance(kind, ErrorKind):
        try:
            kind = ErrorKind(kind)
        except ValueError:
            kind = ErrorKind.UNKNOWN
    return AppError(message=message, kind=kind, code=code, cause=cause)


# =============================================================================
# Exceptions
# =============================================================================

class ApplicationError(Exception):
    """
    Base error class for application-specific errors.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "APPLICATION_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for API responses."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


class ConfigError(ApplicationError):
    """
    Raised when a required setting is missing or invalid.

    Carries the classified AppError that was logged before raising.
    """

    def __init__(self, error: AppError):
        super().__init__(
            error.message,
            code=error.code or "CONFIG_ERROR",
            suggestion="Set the variable in your environment or .env file",
        )
        self.error = error

    def __str__(self) -> str:
        # Keep the raw message so pattern matching on it still works
        return self.message


# =============================================================================
# Logging
# =============================================================================

def _safe_repr(value: Any) -> str:
    try:
        return repr(value)
    except Exception:
        return "<unrepresentable object>"


def _safe_str(value: Any) -> str:
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _prefix(tag: str, context: str | None) -> str:
    return f"[{tag}] [{context}]" if context else f"[{tag}]"


def log_error(
    error: AppError | BaseException | Any,
    context: str | None = None,
    level: int = logging.ERROR,
) -> None:
    """
    Log an error with a prefix that identifies its shape.

    Args:
        error: An AppError, an exception, or any other value
        context: Optional label, e.g. "Auth Config"
        level: Logging level for every emitted line

    The dispatch is on concrete types, checked in order:
    AppError, then BaseException, then everything else.
    """
    if isinstance(error, AppError):
        logger.log(level, f"{_prefix(error.kind.value.upper(), context)}: {error.message}")
        if error.code:
            logger.log(level, f"Error code: {error.code}")
        if error.cause is not None:
            logger.log(level, f"Original error: {_safe_repr(error.cause)}")
        return

    if isinstance(error, BaseException):
        logger.log(level, f"{_prefix('ERROR', context)}: {_safe_str(error)}")
        trace = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        logger.log(level, trace.rstrip())
        return

    logger.log(level, f"{_prefix('UNKNOWN ERROR', context)}: {_safe_repr(error)}")
