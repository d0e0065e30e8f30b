# Burndown Service - Main Application
"""
FastAPI application for Burndown Service.
Provides burndown series and charts for project dashboards.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from burndown_service.config import settings
from burndown_service.dependencies import get_data_store_client
from burndown_service.errors import DataUnavailableError
from burndown_service.models.responses import HealthResponse
from burndown_service.routers import burndown_router

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper()),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    logger.info(f"Starting {settings.service_name} v{settings.service_version}")
    logger.info(f"Reading project data from {settings.data_store_url}")

    yield

    # Shutdown
    await get_data_store_client().close()
    logger.info("Shutting down Burndown Service")


# Create FastAPI app
app = FastAPI(
    title=settings.service_name,
    version=settings.service_version,
    description="Burndown projection (ideal vs. actual remaining work) for project dashboards",
    lifespan=lifespan
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(DataUnavailableError)
async def data_unavailable_handler(request: Request, exc: DataUnavailableError):
    """Report data store failures so the dashboard can offer a retry."""
    logger.warning(f"Data unavailable: {exc}")
    return JSONResponse(
        status_code=503,
        content={
            "error": "data_unavailable",
            "detail": str(exc),
            "project_id": exc.project_id
        }
    )


# Global exception handler
@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all unhandled exceptions."""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "detail": str(exc)}
    )


# Health check endpoint
@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint."""
    return HealthResponse(
        status="healthy",
        version=settings.service_version,
        data_store_url=settings.data_store_url
    )


# Include routers
app.include_router(burndown_router, prefix="/api/v1")


# Root endpoint
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "docs": "/docs",
        "health": "/health"
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "burndown_service.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
