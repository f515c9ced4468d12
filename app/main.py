# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Discover API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from dotenv import load_dotenv

# Provider credentials are read from the process environment, so .env
# must be loaded into it before anything reads settings
load_dotenv()

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.exceptions import DiscoverException, discover_exception_handler
from app.routers import health, discover
from app.auth import routes as auth_routes
from app.auth.providers import configure_oauth_providers, validate_auth_config
from lib.errors import log_error

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Startup validates auth configuration once. Missing or partial provider
    settings are logged, never fatal.
    """
    logger.info(f"Starting Discover API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    app.state.enabled_providers = validate_auth_config()
    app.state.oauth_providers = configure_oauth_providers()
    logger.info(f"Enabled OAuth providers: {[p.id for p in app.state.oauth_providers]}")

    if not settings.is_database_configured:
        logger.warning("Supabase is not configured: listings are unavailable and credentials sign-in is refused")

    yield

    logger.info("Shutting down Discover API")


# Create FastAPI application
app = FastAPI(
    title="Discover API",
    description="""
## Content Listing and Authentication API

Serves paginated "discover" listings per locale and the configuration
the front-end's auth library needs.

### Key Features

- **Discover listing**: `GET /api/v1/{locale}/discover/{page}`
- **Pre-rendering**: `GET /api/v1/discover/pages` lists every page
- **Providers**: only fully configured OAuth providers are exposed
- **Sign-in callback**: credentials sign-in is checked against the user table
""",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {
            "name": "Auth",
            "description": "Providers, sign-in callback and session info",
        },
        {
            "name": "Discover",
            "description": "Paginated content listing",
        },
        {
            "name": "Health",
            "description": "API health and readiness checks",
        },
    ],
)


# =============================================================================
# Middleware
# =============================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Exception Handlers
# =============================================================================

@app.exception_handler(DiscoverException)
async def handle_discover_exception(request: Request, exc: DiscoverException):
    """Handle custom Discover exceptions."""
    return await discover_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions."""
    log_error(exc, f"{request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )


# =============================================================================
# Routers
# =============================================================================

# Authentication endpoints
app.include_router(
    auth_routes.router,
    prefix="/api/v1/auth",
    tags=["Auth"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api/v1",
    tags=["Health"]
)

# Discover listing endpoints
app.include_router(
    discover.router,
    prefix="/api/v1",
    tags=["Discover"]
)


# =============================================================================
# Root Endpoint
# =============================================================================

@app.get("/", tags=["Root"])
async def root():
    """
    Root endpoint - returns API info.
    """
    return {
        "name": "Discover API",
        "company": settings.COMPANY_NAME,
        "version": "1.0.0",
        "docs": "/docs",
        "health": "/api/v1/health",
    }
