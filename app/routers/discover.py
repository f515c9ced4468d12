# =============================================================================
# app/routers/discover.py - Discover Listing Endpoints
# =============================================================================
# Paginated content listing per locale. Public, no authentication.
# =============================================================================

from fastapi import APIRouter, Path

from app.dependencies import ContentServiceDep
from core.models.listing import ListingResponse, PageParam

router = APIRouter()


@router.get("/discover/pages", response_model=list[PageParam])
async def list_discover_pages(content: ContentServiceDep):
    """
    List every (locale, page) pair of the discover listing.

    Used by the front-end to pre-render listing pages.
    """
    return content.list_page_params()


@router.get("/{locale}/discover/{page}", response_model=ListingResponse)
async def get_discover_page(
    content: ContentServiceDep,
    locale: str = Path(..., description="Content locale, e.g. 'en'"),
    page: str = Path(..., description="1-based page number"),
):
    """
    Get one page of the discover listing.

    Returns the page's items plus category and tag facets for the whole
    locale, so filters can be rendered next to any page.
    """
    return content.get_listing_page(locale, page)
