"""
NeuroSphere FastAPI Application

Main entry point for the NeuroSphere wellbeing API.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Common library imports
from common.database import MongoDB
from common.utils import success_response, error_response

# App-specific imports
from neurosphere.config import settings
from neurosphere.database import ENTRY_INDEXES

# Import routers
from neurosphere.routers import (
    mood_router,
    sleep_router,
    therapist_router,
    user_router,
)

# Import service initialization
from neurosphere.dependencies import build_token_verifier, init_all_services

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

VERSION = "1.0.0"


# =============================================================================
# Database Instances
# =============================================================================
# Main database for mood, sleep and user documents
main_db = MongoDB()


# =============================================================================
# Application Lifespan
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown tasks like database connections
    and service initialization.
    """
    # Startup
    logger.info("Starting NeuroSphere API...")
    settings.validate_required()

    await main_db.connect(
        uri=settings.MONGODB_URI,
        database_name=settings.MONGODB_DATABASE,
        server_selection_timeout_ms=settings.MONGODB_TIMEOUT_MS,
    )
    await main_db.ensure_indexes(ENTRY_INDEXES)

    init_all_services(
        db=main_db.db,
        token_verifier=build_token_verifier(settings),
        therapist_api_url=settings.THERAPIST_API_URL,
        therapist_timeout=settings.THERAPIST_TIMEOUT_SECONDS,
        history_max_limit=settings.HISTORY_MAX_LIMIT,
    )
    logger.info("All services initialized successfully")

    yield

    # Shutdown
    logger.info("Shutting down NeuroSphere API...")
    await main_db.disconnect()


# =============================================================================
# FastAPI Application
# =============================================================================
app = FastAPI(
    title="NeuroSphere API",
    description="Mood and sleep tracking with wellbeing analytics and an AI therapist proxy",
    version=VERSION,
    lifespan=lifespan,
    docs_url="/docs" if settings.is_development() else None,
    redoc_url="/redoc" if settings.is_development() else None,
)

# =============================================================================
# CORS Middleware
# =============================================================================
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# Include Routers (all under /api prefix)
# =============================================================================
API_PREFIX = "/api"

app.include_router(mood_router, prefix=API_PREFIX, tags=["Mood"])
app.include_router(sleep_router, prefix=API_PREFIX, tags=["Sleep"])
app.include_router(therapist_router, prefix=API_PREFIX, tags=["Therapist"])
app.include_router(user_router, prefix=API_PREFIX, tags=["User"])


# =============================================================================
# Health Check Endpoint
# =============================================================================
@app.get("/health", tags=["Health"])
async def health():
    """
    Health check endpoint.

    Returns the status of the API and the database connection.
    """
    if not await main_db.ping():
        return JSONResponse(
            status_code=503,
            content=error_response(
                "Database unavailable",
                code="DATABASE_UNAVAILABLE",
                details={"version": VERSION},
            ),
        )

    return success_response({
        "status": "ok",
        "version": VERSION,
        "database": main_db.is_connected,
    })


# =============================================================================
# Run with Uvicorn
# =============================================================================
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "api:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
    )
