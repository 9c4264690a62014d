# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Board Game Reviews API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import settings
from app.exceptions import (
    ReviewsApiException,
    http_exception_handler,
    reviews_api_exception_handler,
    validation_exception_handler,
)
from app.routers import api, categories, comments, health, reviews, users
from app.version import __version__
from lib.database import Database

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

    - Startup: Open the store connection pool
    - Shutdown: Close it
    """
    logger.info(f"Starting Board Game Reviews API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    app.state.database = Database(
        settings.DATABASE_URL,
        min_conn=settings.DB_POOL_MIN,
        max_conn=settings.DB_POOL_MAX,
    )

    yield

    logger.info("Shutting down Board Game Reviews API")
    app.state.database.close()


# Create FastAPI application
app = FastAPI(
    title="Board Game Reviews API",
    description="""
## Board Game Reviews API

Query, filter and sort board game reviews, vote on them, and discuss them
in comments.

### Listing reviews

`GET /api/reviews?category=dexterity&sort_by=votes&order=asc`

- **category**: an existing category slug
- **sort_by**: any review column, or `comment_count` (default `created_at`)
- **order**: `asc` or `desc` (default `desc`)

Every error responds with `{"msg": "..."}`.
""",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
    openapi_tags=[
        {"name": "Api", "description": "Endpoint catalog"},
        {"name": "Categories", "description": "Board game categories"},
        {"name": "Reviews", "description": "List, read and vote on reviews"},
        {"name": "Comments", "description": "Comments on reviews"},
        {"name": "Users", "description": "Review owners and comment authors"},
        {"name": "Health", "description": "API health and readiness checks"},
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

@app.exception_handler(ReviewsApiException)
async def handle_reviews_api_exception(request: Request, exc: ReviewsApiException):
    """Handle custom API exceptions."""
    return await reviews_api_exception_handler(request, exc)


@app.exception_handler(RequestValidationError)
async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """Handle malformed request bodies."""
    return await validation_exception_handler(request, exc)


@app.exception_handler(StarletteHTTPException)
async def handle_http_exception(request: Request, exc: StarletteHTTPException):
    """Handle routing misses."""
    return await http_exception_handler(request, exc)


@app.exception_handler(Exception)
async def handle_general_exception(request: Request, exc: Exception):
    """Handle unexpected exceptions without leaking internals."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"msg": "Internal server error"}
    )


# =============================================================================
# Routers
# =============================================================================

# Endpoint catalog
app.include_router(
    api.router,
    prefix="/api",
    tags=["Api"]
)

# Health check endpoints
app.include_router(
    health.router,
    prefix="/api",
    tags=["Health"]
)

# Category endpoints
app.include_router(
    categories.router,
    prefix="/api/categories",
    tags=["Categories"]
)

# Review endpoints
app.include_router(
    reviews.router,
    prefix="/api/reviews",
    tags=["Reviews"]
)

# Comment endpoints (review-scoped and comment-scoped paths)
app.include_router(
    comments.router,
    prefix="/api",
    tags=["Comments"]
)

# User endpoints
app.include_router(
    users.router,
    prefix="/api/users",
    tags=["Users"]
)
