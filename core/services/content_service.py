# =============================================================================
# core/services/content_service.py - Content Business Logic
# =============================================================================
# Loads content items and assembles discover listing pages.
# Separates HTTP concerns from database/business logic.
# =============================================================================

import logging
from typing import Any

from app.exceptions import ContentUnavailableError, LocaleNotFoundError, PageNotFoundError
from core.models.listing import (
    LOCALES,
    Item,
    ItemCollection,
    ListingResponse,
    PageParam,
)
from core.pagination import paginate_meta, total_pages
from lib.supabase_client import SupabaseClient, SupabaseClientError

logger = logging.getLogger(__name__)


def _unique(values: list[str]) -> list[str]:
    """Deduplicate, keeping first-seen order."""
    return list(dict.fromkeys(v for v in values if v))


class ContentService:
    """
    Service for the discover listing.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def check_locale(locale: str) -> str:
        """
        Raises:
            LocaleNotFoundError: If the locale is not supported
        """
        if locale not in LOCALES:
            raise LocaleNotFoundError(locale, list(LOCALES))
        return locale

    @staticmethod
    def build_collection(rows: list[dict[str, Any]]) -> ItemCollection:
        """Parse item rows and derive category/tag facets."""
        items = [Item(**row) for row in rows]
        return ItemCollection(
            items=items,
            categories=_unique([item.category for item in items]),
            tags=_unique([tag for item in items for tag in item.tags]),
            total=len(items),
        )

    @staticmethod
    def fetch_items(lang: str) -> ItemCollection:
        """
        Fetch all items for a locale.

        Raises:
            LocaleNotFoundError: If the locale is not supported
            ContentUnavailableError: If the database cannot be read
        """
        ContentService.check_locale(lang)
        try:
            rows = SupabaseClient.fetch_items(lang)
        except SupabaseClientError as e:
            logger.error(f"Failed to load items for {lang}: {e.message}")
            raise ContentUnavailableError(e.message)

        return ContentService.build_collection(rows)

    @staticmethod
    def get_listing_page(locale: str, raw_page: Any) -> ListingResponse:
        """
        Build one page of the discover listing.

        Raises:
            InvalidPageError: If raw_page is not a positive integer
            PageNotFoundError: If the page is past the last page
        """
        meta = paginate_meta(raw_page)
        collection = ContentService.fetch_items(locale)
        pages = total_pages(collection.total)

        if meta.page > pages:
            raise PageNotFoundError(meta.page, pages)

        return ListingResponse(
            items=collection.items[meta.start:meta.end],
            categories=collection.categories,
            tags=collection.tags,
            start=meta.start,
            page=meta.page,
            total=collection.total,
            total_pages=pages,
        )

    @staticmethod
    def list_page_params() -> list[PageParam]:
        """
        Every (locale, page) pair of the discover listing, for pre-rendering.

        A locale whose content cannot be loaded is skipped rather than
        failing the whole list.
        """
        params = []
        for locale in LOCALES:
            try:
                collection = ContentService.fetch_items(locale)
            except ContentUnavailableError:
                logger.warning(f"Skipping page params for {locale}: content unavailable")
                continue
            params.extend(
                PageParam(locale=locale, page=str(page))
                for page in range(1, total_pages(collection.total) + 1)
            )
        return params
