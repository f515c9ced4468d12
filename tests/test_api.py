# =============================================================================
# tests/test_api.py - API Endpoint Tests
# =============================================================================
# Endpoint tests with FastAPI's TestClient. Provider credentials are set
# with monkeypatch before the app starts, since startup reads them once.
# =============================================================================

import logging
import time
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from jose import jwt

from app.dependencies import get_content_service
from app.main import app
from core.services.content_service import ContentService

SECRET = "test-nextauth-secret"

PROVIDER_VARS = [
    "GOOGLE_CLIENT_ID", "GOOGLE_CLIENT_SECRET",
    "GITHUB_CLIENT_ID", "GITHUB_CLIENT_SECRET",
    "FACEBOOK_CLIENT_ID", "FACEBOOK_CLIENT_SECRET",
    "MICROSOFT_CLIENT_ID", "MICROSOFT_CLIENT_SECRET",
    "NEXTAUTH_SECRET", "NEXTAUTH_URL",
    "SUPABASE_URL", "SUPABASE_SERVICE_KEY",
]


@pytest.fixture
def clean_env(monkeypatch):
    """Remove every auth/database setting from the process environment."""
    for name in PROVIDER_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def client(clean_env):
    clean_env.setenv("NEXTAUTH_SECRET", SECRET)
    clean_env.setenv("NEXTAUTH_URL", "http://localhost:3000")
    clean_env.setenv("GITHUB_CLIENT_ID", "github-id")
    clean_env.setenv("GITHUB_CLIENT_SECRET", "github-secret")
    clean_env.setenv("GOOGLE_CLIENT_ID", "google-id")
    clean_env.setenv("GOOGLE_CLIENT_SECRET", "google-secret")
    # Partially configured: must not block startup
    clean_env.setenv("FACEBOOK_CLIENT_ID", "facebook-id")
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def _token(**claims) -> str:
    payload = {"sub": "user-123", "email": "jane@example.com", "exp": int(time.time()) + 600}
    payload.update(claims)
    return jwt.encode(payload, SECRET, algorithm="HS256")


# =============================================================================
# Auth
# =============================================================================

class TestProvidersEndpoint:

    def test_lists_enabled_providers_in_order(self, client):
        response = client.get("/api/v1/auth/providers")

        assert response.status_code == 200
        assert response.json() == {"providers": [{"id": "google"}, {"id": "github"}]}

    def test_never_exposes_secrets(self, client):
        body = client.get("/api/v1/auth/providers").text

        assert "secret" not in body
        assert "google-id" not in body


class TestSignInCallback:

    def test_oauth_allowed_without_database(self, client):
        response = client.post(
            "/api/v1/auth/callback/signin",
            json={"user": {"email": "jane@example.com"}, "account": {"provider": "google"}},
        )

        assert response.json() == {"allowed": True}

    def test_credentials_refused_without_database(self, client):
        response = client.post(
            "/api/v1/auth/callback/signin",
            json={"user": {"email": "jane@example.com"}, "account": {"provider": "credentials"}},
        )

        assert response.json() == {"allowed": False}

    def test_credentials_allowed_for_known_user(self, client, clean_env):
        clean_env.setenv("SUPABASE_URL", "https://x.supabase.co")
        clean_env.setenv("SUPABASE_SERVICE_KEY", "key")

        with patch("lib.supabase_client.SupabaseClient.fetch_user_by_email", return_value={"id": "u-1"}):
            response = client.post(
                "/api/v1/auth/callback/signin",
                json={"user": {"email": "jane@example.com"}, "account": {"provider": "credentials"}},
            )

        assert response.json() == {"allowed": True}


class TestSessionEndpoint:

    def test_valid_token(self, client):
        response = client.get(
            "/api/v1/auth/session",
            headers={"Authorization": f"Bearer {_token(provider='github')}"},
        )

        assert response.status_code == 200
        assert response.json()["user"] == {
            "id": "user-123",
            "email": "jane@example.com",
            "name": None,
            "provider": "github",
        }

    def test_expired_token(self, client):
        token = _token(exp=int(time.time()) - 10)

        response = client.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Token has expired"

    def test_wrong_secret(self, client):
        token = jwt.encode({"sub": "user-123"}, "other-secret", algorithm="HS256")

        response = client.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_token_without_subject(self, client):
        token = jwt.encode({"email": "jane@example.com"}, SECRET, algorithm="HS256")

        response = client.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token: missing user ID"

    def test_numeric_user_id_claim_is_returned_as_string(self, client):
        response = client.get(
            "/api/v1/auth/session",
            headers={"Authorization": f"Bearer {_token(userId=42)}"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["id"] == "42"

    def test_malformed_claims_are_unauthorized(self, client):
        response = client.get(
            "/api/v1/auth/session",
            headers={"Authorization": f"Bearer {_token(email=123)}"},
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid token: malformed claims"

    def test_missing_secret_is_reported_as_config_error(self, client, clean_env):
        clean_env.delenv("NEXTAUTH_SECRET")

        response = client.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {_token()}"})

        assert response.status_code == 503
        assert response.json()["detail"] == "NextAuth is not properly configured"

    def test_missing_secret_is_logged_once_as_config_error(self, client, clean_env, caplog):
        clean_env.delenv("NEXTAUTH_SECRET")
        caplog.set_level(logging.DEBUG)

        client.get("/api/v1/auth/session", headers={"Authorization": f"Bearer {_token()}"})

        messages = [r.getMessage() for r in caplog.records]
        assert "[CONFIG]: Missing required environment variables: NEXTAUTH_SECRET" in messages
        assert not any(m.startswith("[ERROR]") for m in messages)


class TestAuthErrorEndpoint:

    def test_maps_known_error(self, client):
        response = client.post("/api/v1/auth/error", json={"message": "Missing MICROSOFT_CLIENT_ID"})

        assert response.json() == {"error": "Microsoft authentication is not properly configured"}

    def test_unknown_error_passes_through(self, client):
        response = client.post("/api/v1/auth/error", json={"message": "xyz"})

        assert response.json() == {"error": "xyz"}


# =============================================================================
# Discover
# =============================================================================

class TestDiscoverEndpoints:

    @pytest.fixture
    def mock_items(self, sample_item_rows):
        with patch("core.services.content_service.SupabaseClient") as mock:
            mock.fetch_items.return_value = sample_item_rows
            yield mock

    def test_listing_page(self, client, mock_items):
        response = client.get("/api/v1/en/discover/2")

        assert response.status_code == 200
        body = response.json()
        assert body["page"] == 2
        assert body["start"] == 12
        assert body["total"] == 30
        assert body["total_pages"] == 3
        assert body["items"][0]["id"] == "item-12"

    def test_invalid_page(self, client, mock_items):
        response = client.get("/api/v1/en/discover/abc")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_PAGE"

    def test_page_past_end(self, client, mock_items):
        response = client.get("/api/v1/en/discover/9")

        assert response.status_code == 404
        assert response.json()["code"] == "PAGE_NOT_FOUND"

    def test_unknown_locale(self, client, mock_items):
        response = client.get("/api/v1/xx/discover/1")

        assert response.status_code == 404
        assert response.json()["code"] == "LOCALE_NOT_FOUND"

    def test_page_params(self, client, mock_items):
        response = client.get("/api/v1/discover/pages")

        assert response.status_code == 200
        assert {"locale": "en", "page": "3"} in response.json()

    def test_service_can_be_overridden(self, client):
        class EmptyContent(ContentService):
            @staticmethod
            def list_page_params():
                return []

        app.dependency_overrides[get_content_service] = lambda: EmptyContent

        assert client.get("/api/v1/discover/pages").json() == []


# =============================================================================
# Health
# =============================================================================

class TestHealthEndpoints:

    def test_health(self, client):
        assert client.get("/api/v1/health").json()["status"] == "healthy"

    def test_live(self, client):
        assert client.get("/api/v1/health/live").json()["status"] == "alive"

    def test_ready_is_degraded_without_database(self, client):
        body = client.get("/api/v1/health/ready").json()

        assert body["status"] == "degraded"
        assert body["checks"]["auth_providers"]["google"] is True
        assert body["checks"]["auth_providers"]["facebook"] is False
