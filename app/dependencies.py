# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends

from core.services.content_service import ContentService


def get_content_service() -> type[ContentService]:
    """
    Get the content service.

    Routes depend on this instead of importing the service directly so
    tests can swap it via app.dependency_overrides.
    """
    return ContentService


# Type alias for dependency injection
ContentServiceDep = Annotated[type[ContentService], Depends(get_content_service)]
