# =============================================================================
# core/models/__init__.py - Schema Exports
# =============================================================================

from .listing import (
    DEFAULT_LOCALE,
    LOCALES,
    Item,
    ItemCollection,
    ListingResponse,
    PageParam,
)

__all__ = [
    "DEFAULT_LOCALE",
    "LOCALES",
    "Item",
    "ItemCollection",
    "ListingResponse",
    "PageParam",
]
