# =============================================================================
# tests/test_auth_errors.py - Auth Error Message Tests
# =============================================================================

import logging
import re

import pytest

from app.auth.errors import (
    AUTH_ERROR_MESSAGES,
    UNKNOWN_AUTH_ERROR,
    handle_auth_error,
)
from lib.errors import ApplicationError, ConfigError, ErrorKind, create_app_error


class TestHandleAuthError:
    """Tests for mapping errors to user-facing messages."""

    @pytest.mark.parametrize("text, expected", [
        ("Missing GOOGLE_CLIENT_ID", "Google authentication is not properly configured"),
        ("google_client_id is undefined", "Google authentication is not properly configured"),
        ("GITHUB_CLIENT_ID not set", "GitHub authentication is not properly configured"),
        ("FACEBOOK_CLIENT_ID not set", "Facebook authentication is not properly configured"),
        ("MICROSOFT_CLIENT_ID not set", "Microsoft authentication is not properly configured"),
        ("supabase url invalid", "Supabase authentication is not properly configured"),
        ("NEXTAUTH_SECRET missing", "NextAuth is not properly configured"),
    ])
    def test_known_patterns(self, text, expected):
        assert handle_auth_error(RuntimeError(text)) == {"error": expected}

    def test_first_match_wins(self):
        error = RuntimeError("NEXTAUTH and GITHUB_CLIENT_ID and SUPABASE")

        assert handle_auth_error(error)["error"] == "GitHub authentication is not properly configured"

    def test_unmatched_error_keeps_message(self):
        assert handle_auth_error(ValueError("xyz")) == {"error": "xyz"}

    def test_plain_string_passes_through(self):
        assert handle_auth_error("boom") == {"error": "boom"}

    @pytest.mark.parametrize("value", [None, 42, {"message": "GOOGLE_CLIENT_ID"}])
    def test_other_values_get_fallback(self, value):
        assert handle_auth_error(value) == {"error": UNKNOWN_AUTH_ERROR}

    def test_exceptions_are_logged(self, caplog):
        caplog.set_level(logging.DEBUG)

        handle_auth_error(RuntimeError("xyz"))

        assert caplog.records[0].getMessage() == "[ERROR] [Authentication]: xyz"

    def test_config_error_from_accessor_is_mapped(self):
        error = ConfigError(create_app_error(
            "Missing required environment variables: NEXTAUTH_SECRET",
            ErrorKind.CONFIG,
            "ENV_MISSING",
        ))

        assert handle_auth_error(error)["error"] == "NextAuth is not properly configured"

    def test_application_error_maps_on_message_not_suggestion(self):
        error = ApplicationError("boom", suggestion="Check SUPABASE_URL in your .env")

        assert handle_auth_error(error) == {"error": "boom"}

    def test_application_error_message_is_matched(self):
        error = ApplicationError("GOOGLE_CLIENT_ID rejected", code="OAUTH_ERROR")

        assert handle_auth_error(error) == {"error": "Google authentication is not properly configured"}

    def test_custom_pattern_table(self):
        table = [(re.compile("quota", re.IGNORECASE), "Too many attempts")]

        assert handle_auth_error(RuntimeError("Quota exceeded"), table) == {"error": "Too many attempts"}
        assert handle_auth_error(RuntimeError("GOOGLE_CLIENT_ID"), table) == {"error": "GOOGLE_CLIENT_ID"}

    def test_default_table_order(self):
        messages = [message for _, message in AUTH_ERROR_MESSAGES]

        assert [m.split()[0] for m in messages] == [
            "Google", "GitHub", "Facebook", "Microsoft", "Supabase", "NextAuth",
        ]
