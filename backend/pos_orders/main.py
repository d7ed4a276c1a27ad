"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from pos_orders.api.v1 import health, orders
from pos_orders.config import settings
from pos_orders.db import dispose_engine
from pos_orders.logging import setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info("Starting POS Orders API", debug=settings.debug, sales_tax_rate=str(settings.sales_tax_rate))

    yield

    logger.info("Shutting down POS Orders API")
    dispose_engine()
    logger.info("Database connections disposed")


app = FastAPI(
    title="POS Orders API",
    description="Order management for the point-of-sale terminal",
    version="0.1.0",
    lifespan=lifespan,
)

# API routes
app.include_router(health.router, prefix="/api/v1", tags=["health"])
app.include_router(orders.router, prefix="/api/v1", tags=["orders"])
