"""
FastAPI application entry point for the Quiz Insights API.

Configures logging and CORS, registers the API routers and exposes health and
root endpoints.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quiz_insights.api import api_router
from quiz_insights.core.config import get_settings
from quiz_insights.services.tiering import list_tiers


settings = get_settings()

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Lifespan context manager for startup and shutdown logging.

    The tier table is static, so startup only reports what was loaded.
    """
    logger.info(f"{settings.app_name} starting")
    logger.info(f"Difficulty tiers loaded: {[tier.level.value for tier in list_tiers()]}")

    yield

    logger.info(f"{settings.app_name} shutting down")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description=(
        "Question difficulty service for the quiz platform. "
        "Classifies correct answer rates into difficulty tiers and "
        "produces per-question and per-quiz difficulty reports."
    ),
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.get("/health")
async def health_check():
    """
    Health check endpoint for monitoring and load balancer probes.

    Returns:
        Dict with status 'healthy'
    """
    return {"status": "healthy"}


@app.get("/")
async def root():
    """
    Root endpoint providing API information.

    Returns:
        Dict with API name and version
    """
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
        "openapi": "/openapi.json",
    }


# Run with uvicorn when executed directly
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "quiz_insights.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
