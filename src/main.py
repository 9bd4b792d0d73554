"""Slack Summariser.

FastAPI application entry point with lifespan management.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import httpx
import openai
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from src.core.config import settings
from src.core.logging import setup_logging
from src.core.slack import InvalidThreadReferenceError, SlackAPIError
from src.services.credential_check import router as credential_router
from src.services.thread_summarizer import router as summarizer_router

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)

UPSTREAM_ERROR_DETAIL = "Failed to summarize thread"


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager for startup and shutdown."""
    logger.info(f"Starting {settings.app_name} (model: {settings.openai_model})...")
    yield
    logger.info("Shutting down...")


app = FastAPI(
    title="Slack Summariser",
    description="Summarise Slack threads with OpenAI",
    version="0.1.0",
    lifespan=lifespan,
)

# Include service routers
app.include_router(summarizer_router)
app.include_router(credential_router)


@app.exception_handler(InvalidThreadReferenceError)
async def invalid_thread_reference_handler(
    request: Request, exc: InvalidThreadReferenceError
) -> JSONResponse:
    logger.warning(f"Rejected thread reference: {exc}")
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(SlackAPIError)
@app.exception_handler(httpx.HTTPError)
@app.exception_handler(openai.APIError)
async def upstream_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Upstream call failed for {request.url.path}: {exc!r}")
    return JSONResponse(status_code=502, content={"detail": UPSTREAM_ERROR_DETAIL})


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


@app.get("/")
async def root() -> dict:
    """Root endpoint with service info."""
    return {
        "name": settings.app_name,
        "version": "0.1.0",
        "description": "Summarise Slack threads with OpenAI",
        "model": settings.openai_model,
        "languages": ["en", "zh-Hant"],
    }


@app.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness check."""
    return HealthResponse(status="healthy")
