"""
Database session configuration.

This module handles database engine creation and session management
using SQLAlchemy with async support (SQLite via aiosqlite by default).
"""

from contextlib import asynccontextmanager
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import declarative_base
from tracker.app.core.config import settings

# Create declarative base for models
Base = declarative_base()


def create_engine(database_url: str = None) -> AsyncEngine:
    """Create an async engine for the configured (or given) database URL."""
    return create_async_engine(
        database_url or settings.database_url,
        echo=settings.db_echo,
        future=True,
    )


async def init_models(engine: AsyncEngine) -> None:
    """Create every table registered on Base (existing tables are left alone)."""
    # Import models to ensure they are registered with Base
    from tracker.app.models.parcel import Parcel  # noqa: F401
    
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def tracker_session(database_url: str = None):
    """
    Open a database for the lifetime of a unit of work.
    
    1. Creates the engine and the parcel table.
    2. Yields a single session shared by every store operation.
    3. Closes the session and disposes the engine on exit.
    """
    engine = create_engine(database_url)
    try:
        await init_models(engine)
        
        # Create async session factory
        session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )
        async with session_factory() as session:
            yield session
    finally:
        await engine.dispose()
