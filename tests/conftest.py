"""
Pytest configuration and fixtures.
"""
import os

# Must be set before commerce_service.core.config is imported
os.environ.setdefault("COMMERCE_SERVICE__DB_URL", "sqlite:///:memory:")
os.environ.setdefault("COMMERCE_SERVICE__LOG_LEVEL", "WARNING")

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from commerce_service.infrastructure.persistence.models import Base


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite engine with the schema created."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine):
    """Database session rolled back after each test."""
    async_session = async_sessionmaker(
        db_engine,
        class_=AsyncSession,
        expire_on_commit=False
    )

    async with async_session() as session:
        yield session
        await session.rollback()
