"""
Database configuration for the commerce service.

Provides:
- Database initialization (init_database, init_db, close_db)
- Async session management (get_db)
"""
import logging
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from .models import Base

logger = logging.getLogger("commerce-service.infrastructure.persistence.database")

# ==================== Database Configuration ====================

db_url = None
async_db_url = None
engine = None
async_session_maker = None


def to_async_url(database_url: str) -> str:
    """Rewrite a sync SQLAlchemy URL to its async driver form."""
    if database_url.startswith("sqlite:///"):
        return database_url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return database_url


def init_database(database_url: str):
    """
    Initialize database engine and session maker.

    Args:
        database_url: SQLAlchemy database URL
    """
    global db_url, async_db_url, engine, async_session_maker

    db_url = database_url
    async_db_url = to_async_url(database_url)
    in_memory = ":memory:" in async_db_url

    if "sqlite" in async_db_url and in_memory:
        # In-memory databases live on a single shared connection
        engine = create_async_engine(
            async_db_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    elif "sqlite" in async_db_url:
        db_path = async_db_url.split(":///", 1)[1]
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
        engine = create_async_engine(
            async_db_url,
            echo=False,
            pool_pre_ping=True,
        )
    else:
        engine = create_async_engine(
            async_db_url,
            echo=False,
            pool_pre_ping=True,
        )

    if "sqlite" in async_db_url:
        @event.listens_for(engine.sync_engine, "connect")
        def set_sqlite_pragma(dbapi_conn, connection_record):
            """Set SQLite pragmas"""
            cursor = dbapi_conn.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            if not in_memory:
                cursor.execute("PRAGMA journal_mode=WAL")
                cursor.execute("PRAGMA synchronous=NORMAL")
                cursor.execute("PRAGMA busy_timeout=30000")  # 30 seconds
            cursor.close()

        logger.info("SQLite pragmas configured")

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    logger.info(f"Database initialized with URL: {db_url}")


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency for getting a request-scoped database session.

    Commits when the handler succeeds, rolls back when it raises.

    Yields:
        AsyncSession: Database session
    """
    if async_session_maker is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except Exception as e:
            logger.debug(f"Rolling back transaction: {e}")
            await session.rollback()
            raise


async def init_db():
    """Initialize database (create tables)"""
    if engine is None:
        raise RuntimeError("Database not initialized. Call init_database() first.")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema initialized")


async def close_db():
    """Close database connections"""
    if engine is not None:
        await engine.dispose()
        logger.info("Database connections closed")
