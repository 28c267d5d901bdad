"""Pytest configuration and fixtures."""

from datetime import date

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

import components.customer.models  # noqa: F401
import components.transaction.models  # noqa: F401
from components.core.database import DatabaseManager
from components.ledger.service import LedgerService


@pytest.fixture
def today() -> date:
    """Fixed calendar date the ledger compares due dates against."""
    return date(2024, 3, 1)


@pytest.fixture
async def db_manager(tmp_path) -> DatabaseManager:
    """Database manager over a fresh SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'ledger.db'}")
    manager = DatabaseManager(engine)
    await manager.create_tables()
    yield manager
    await manager.dispose()


@pytest.fixture
async def session(db_manager: DatabaseManager):
    """Database session for a single test."""
    async with db_manager.get_db() as session:
        yield session


@pytest.fixture
def service(session, today: date) -> LedgerService:
    """Ledger service pinned to the fixed date."""
    return LedgerService(session, today=lambda: today)
