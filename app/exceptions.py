# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Errors carry a machine-readable code and, where possible, a suggestion
# telling the caller how to fix the request.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.responses import JSONResponse


class DiscoverException(Exception):
    """
    Base exception for the Discover API.

    All custom exceptions inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: str = "DISCOVER_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Listing Exceptions
# =============================================================================

class InvalidPageError(DiscoverException):
    """Raised when a page parameter is not a positive integer."""

    def __init__(self, raw_page: Any):
        super().__init__(
            message=f"Invalid page: {raw_page!r}",
            code="INVALID_PAGE",
            status_code=400,
            suggestion="Pages are numbered from 1",
            details={"page": str(raw_page)}
        )


class PageNotFoundError(DiscoverException):
    """Raised when a page is past the end of the listing."""

    def __init__(self, page: int, total_pages: int):
        super().__init__(
            message=f"Page {page} not found",
            code="PAGE_NOT_FOUND",
            status_code=404,
            suggestion=f"Request a page between 1 and {total_pages}",
            details={"page": page, "total_pages": total_pages}
        )


class LocaleNotFoundError(DiscoverException):
    """Raised when a locale is not supported."""

    def __init__(self, locale: str, supported: list[str]):
        super().__init__(
            message=f"Unsupported locale: {locale}",
            code="LOCALE_NOT_FOUND",
            status_code=404,
            suggestion=f"Use one of: {', '.join(supported)}",
            details={"locale": locale, "supported": supported}
        )


class ContentUnavailableError(DiscoverException):
    """Raised when content cannot be loaded from the database."""

    def __init__(self, error: str):
        super().__init__(
            message=f"Content is unavailable: {error}",
            code="CONTENT_UNAVAILABLE",
            status_code=503,
            suggestion="Try again later or contact support if the issue persists",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def discover_exception_handler(
    request: Request,
    exc: DiscoverException
) -> JSONResponse:
    """
    Convert DiscoverException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )
