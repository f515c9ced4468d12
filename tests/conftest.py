# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides settings-store fixtures so tests never depend on the real
#   process environment
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")

import pytest


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def full_env():
    """Settings store with every provider and base setting present."""
    return {
        "NEXTAUTH_SECRET": "test-nextauth-secret",
        "NEXTAUTH_URL": "http://localhost:3000",
        "GOOGLE_CLIENT_ID": "google-id",
        "GOOGLE_CLIENT_SECRET": "google-secret",
        "GITHUB_CLIENT_ID": "github-id",
        "GITHUB_CLIENT_SECRET": "github-secret",
        "FACEBOOK_CLIENT_ID": "facebook-id",
        "FACEBOOK_CLIENT_SECRET": "facebook-secret",
        "MICROSOFT_CLIENT_ID": "microsoft-id",
        "MICROSOFT_CLIENT_SECRET": "microsoft-secret",
        "NEXT_PUBLIC_SUPABASE_URL": "https://test-project.supabase.co",
        "NEXT_PUBLIC_SUPABASE_ANON_KEY": "test-anon-key",
        "SUPABASE_URL": "https://test-project.supabase.co",
        "SUPABASE_SERVICE_KEY": "test-service-key",
    }


@pytest.fixture
def sample_item_rows():
    """Item rows as returned by the items table (newest first)."""
    return [
        {
            "id": f"item-{i}",
            "slug": f"item-{i}",
            "title": f"Item {i}",
            "lang": "en",
            "category": "guides" if i % 2 else "news",
            "tags": ["intro"] if i % 3 == 0 else ["setup", "intro"],
            "published_at": "2024-01-15T10:00:00Z",
        }
        for i in range(30)
    ]
