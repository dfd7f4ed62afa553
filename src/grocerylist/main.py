"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from grocerylist import __version__
from grocerylist.config import get_settings
from grocerylist.database import Base, async_engine
from grocerylist.logging_config import configure_logging, get_logger
from grocerylist.routers import grocery_router, recipes_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info("Starting Grocery List API")

    async with async_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialized")

    yield

    logger.info("Shutting down Grocery List API")
    await async_engine.dispose()


app = FastAPI(
    title="Grocery List API",
    description="Merge recipe ingredients into one aisle-sorted shopping list",
    version=__version__,
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
app.include_router(recipes_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "grocerylist-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Grocery List API",
        "version": __version__,
        "docs": "/docs",
        "health": "/health",
    }
