# =============================================================================
# core/pagination.py - Listing Pagination
# =============================================================================
# Page arithmetic for the discover listing. Pages are 1-based.
# =============================================================================

import math
from dataclasses import dataclass
from typing import Any

from app.exceptions import InvalidPageError

PAGE_SIZE = 12


@dataclass(frozen=True)
class PageMeta:
    """Position of one page: items[start:end]."""
    page: int
    start: int
    end: int


def total_pages(count: int, page_size: int = PAGE_SIZE) -> int:
    """Number of pages needed for `count` items. An empty listing still has one page."""
    return max(1, math.ceil(count / page_size))


def paginate_meta(raw_page: Any, page_size: int = PAGE_SIZE) -> PageMeta:
    """
    Parse a page parameter and compute its slice bounds.

    Raises:
        InvalidPageError: If raw_page is not a positive integer
    """
    raw = str(raw_page)
    # ASCII digits only, so "+2", "1_0" and non-Latin numerals are rejected
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidPageError(raw_page)
    page = int(raw)
    if page < 1:
        raise InvalidPageError(raw_page)

    start = (page - 1) * page_size
    return PageMeta(page=page, start=start, end=start + page_size)
