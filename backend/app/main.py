"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import (
    feeding_router,
    horses_router,
    schedules_router,
    users_router,
)
from app.config import get_settings
from app.database import init_db
from app.logging import setup_logging

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    setup_logging(settings.log_level)
    await init_db()
    structlog.get_logger(__name__).info(
        "app_started",
        name=settings.app_name,
        version=settings.app_version,
        welfare_on_infra_error=settings.welfare_on_infra_error,
    )
    yield


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Stable scheduling with horse welfare limits",
    lifespan=lifespan,
)

# CORS middleware for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


# Register API routers
app.include_router(horses_router, prefix="/api")
app.include_router(users_router, prefix="/api")
app.include_router(schedules_router, prefix="/api")
app.include_router(feeding_router, prefix="/api")
