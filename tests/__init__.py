# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Discover API:
# - test_errors.py / test_env.py: error taxonomy and settings access
# - test_auth_*.py: provider validation, error messages, callbacks
# - test_pagination.py / test_content_service.py: listing logic
# - test_api.py: endpoint tests with FastAPI's TestClient
#
# Run tests with: pytest
# =============================================================================
