# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .content_service import ContentService

__all__ = [
    "ContentService",
]
