"""Database configuration."""

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from .settings import settings

# Global engine variables (lazy initialization)
async_engine = None
AsyncSessionLocal = None


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite leaves ON DELETE CASCADE disabled unless asked per connection."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def get_async_engine():
    """Get or create async engine."""
    global async_engine
    if async_engine is None:
        is_sqlite = settings.DATABASE_URL.startswith("sqlite")
        kwargs = {"echo": settings.DATABASE_ECHO, "pool_pre_ping": True}
        if not is_sqlite:
            kwargs["pool_recycle"] = 3600
        async_engine = create_async_engine(settings.DATABASE_URL, **kwargs)
        if is_sqlite:
            event.listen(async_engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return async_engine


def get_async_session_local():
    """Get or create async session factory."""
    global AsyncSessionLocal
    if AsyncSessionLocal is None:
        AsyncSessionLocal = async_sessionmaker(
            get_async_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return AsyncSessionLocal


async def create_all_tables():
    """Create tables for every registered model."""
    from petshelter.models import Base

    async with get_async_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine():
    """Dispose the engine's connection pool."""
    if async_engine is not None:
        await async_engine.dispose()


def reset_engines():
    """Reset all engines and session factories for testing."""
    global async_engine, AsyncSessionLocal
    async_engine = None
    AsyncSessionLocal = None
