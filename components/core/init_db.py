"""Database initialization and dependency injection."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

import fastapi
from sqlalchemy.ext.asyncio import AsyncSession

from components.core.database import DatabaseManager
# Import all models to ensure they're registered
import components.customer.models
import components.transaction.models

logger = logging.getLogger(__name__)

# Create a single instance of DatabaseManager
db_manager = DatabaseManager()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for getting database sessions."""
    async with db_manager.get_db() as session:
        yield session


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI) -> AsyncIterator[None]:
    """Create missing tables on startup and release the pool on shutdown."""
    await db_manager.create_tables()
    logger.info("Database tables are ready")
    try:
        yield
    finally:
        await db_manager.dispose()
