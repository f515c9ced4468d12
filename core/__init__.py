# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains the listing logic:
# - models/: Pydantic schemas for content and listing pages
# - pagination.py: Page arithmetic
# - services/: Content loading and page assembly
# =============================================================================
