"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mealplanner.config import get_settings
from mealplanner.logging_config import configure_logging, get_logger
from mealplanner.routers import grocery_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level, json_format=settings.json_logs)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(f"Starting Mealplanner API ({settings.environment})")
    yield
    logger.info("Shutting down Mealplanner API")


app = FastAPI(
    title="Mealplanner API",
    description="Ingredient parsing and grocery lists for planned meals",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(grocery_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "mealplanner-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Mealplanner API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
