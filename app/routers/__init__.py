# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by feature:
# - health.py: Health check endpoints
# - discover.py: Paginated content listing
#
# Auth routes live in app/auth/routes.py.
# Each router is mounted in main.py with a URL prefix.
# =============================================================================

from . import health
from . import discover

__all__ = [
    "health",
    "discover",
]
