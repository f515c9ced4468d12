# =============================================================================
# lib/supabase_client.py - Supabase Client Wrapper
# =============================================================================
# This module provides a typed wrapper for Supabase database operations.
# It implements the singleton pattern to reuse a single client connection
# and provides specialized methods for fetching:
# - Users by email (sign-in validation)
# - Content items for the discover listing
#
# Usage:
#   from lib.supabase_client import SupabaseClient
#   user = SupabaseClient.fetch_user_by_email("jane@example.com")
# =============================================================================

from __future__ import annotations

import logging
from typing import Any

from supabase import create_client, Client

from lib.env import get_env_variable
from lib.errors import ApplicationError, ConfigError

# Set up logging for this module
logger = logging.getLogger(__name__)

# PostgREST code returned by .single() when no row matches
NO_ROWS_CODE = "PGRST116"


class SupabaseClientError(ApplicationError):
    """Error during Supabase operations."""

    def __init__(
        self,
        message: str,
        code: str = "SUPABASE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code=code, suggestion=suggestion, details=details)


class SupabaseClient:
    """
    Typed wrapper for Supabase database operations.

    Implements singleton pattern - one client instance is shared across
    the application. All methods are class methods for easy access without
    instantiation.
    """

    _instance: Client | None = None

    @classmethod
    def get_client(cls) -> Client:
        """
        Get or create the singleton Supabase client.

        Uses the service_role key, which bypasses Row Level Security.
        This is appropriate for server-side operations.

        Raises:
            SupabaseClientError: If credentials are missing or client
                creation fails
        """
        if cls._instance is None:
            try:
                url = get_env_variable("SUPABASE_URL")
                key = get_env_variable("SUPABASE_SERVICE_KEY")
            except ConfigError as e:
                raise SupabaseClientError(
                    message=f"Supabase is not configured: {e.message}",
                    code="CLIENT_NOT_CONFIGURED",
                    suggestion="Set SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e

            try:
                cls._instance = create_client(url, key)
                logger.info("Supabase client initialized successfully")
            except Exception as e:
                raise SupabaseClientError(
                    message=f"Failed to create Supabase client: {e}",
                    code="CLIENT_INIT_FAILED",
                    suggestion="Check SUPABASE_URL and SUPABASE_SERVICE_KEY in your .env file"
                ) from e
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the cached client (used by tests)."""
        cls._instance = None

    # -------------------------------------------------------------------------
    # Users
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_user_by_email(cls, email: str) -> dict[str, Any] | None:
        """
        Fetch a user row by email.

        Args:
            email: The email address to look up

        Returns:
            User dict, or None if no user has this email

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table("users")
                .select("id, email, name")
                .eq("email", email)
                .single()
                .execute()
            )
            return response.data

        except Exception as e:
            if NO_ROWS_CODE in str(e):
                return None
            raise SupabaseClientError(
                message=f"Failed to fetch user: {e}",
                code="FETCH_USER_FAILED",
                suggestion="Check that the users table exists and is reachable",
            ) from e

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    @classmethod
    def fetch_items(cls, lang: str) -> list[dict[str, Any]]:
        """
        Fetch all published content items for a language.

        Returns items newest first.

        Raises:
            SupabaseClientError: If the query fails
        """
        client = cls.get_client()

        try:
            response = (
                client.table("items")
                .select("*")
                .eq("lang", lang)
                .eq("published", True)
                .order("published_at", desc=True)
                .execute()
            )
            return response.data or []

        except Exception as e:
            raise SupabaseClientError(
                message=f"Failed to fetch items: {e}",
                code="FETCH_ITEMS_FAILED",
                suggestion="Check that the items table exists and is reachable",
                details={"lang": lang}
            ) from e
