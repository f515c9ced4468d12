# =============================================================================
# core/models/listing.py - Discover Listing Schemas
# =============================================================================
# These models define the API contract for the discover listing:
# - Item: One content entry
# - ItemCollection: Everything known about a locale's content
# - ListingResponse: One page of the listing, ready to render
# - PageParam: One (locale, page) pair for pre-rendering
# =============================================================================

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# Supported content locales; the first is the default
LOCALES: tuple[str, ...] = ("en", "fr", "de")
DEFAULT_LOCALE = LOCALES[0]


class Item(BaseModel):
    """
    A content item as stored in the items table.

    Example:
        {
            "id": "7b0c...",
            "slug": "getting-started",
            "title": "Getting started",
            "category": "guides",
            "tags": ["intro", "setup"]
        }
    """
    model_config = ConfigDict(extra="ignore")

    id: str
    slug: str
    title: str
    summary: str | None = None
    image_url: str | None = None
    category: str | None = None
    tags: list[str] = Field(default_factory=list)
    published_at: datetime | None = None


class ItemCollection(BaseModel):
    """All items for a locale plus the facets derived from them."""
    items: list[Item] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    total: int = 0


class ListingResponse(BaseModel):
    """One page of the discover listing."""
    items: list[Item]
    categories: list[str]
    tags: list[str]
    start: int = Field(..., ge=0, description="Index of the first item on this page")
    page: int = Field(..., ge=1)
    total: int = Field(..., ge=0, description="Total items across all pages")
    total_pages: int = Field(..., ge=1)
    base_path: str = "/discover"


class PageParam(BaseModel):
    """A (locale, page) pair that has content."""
    locale: str
    page: str
