"""Async Session Factory: provides async DB sessions for direct usage outside FastAPI.

Invariants:
    - Meant for scripts (seed import CLI) and migrations, not request handling

Design Decisions:
    - Separate from infrastructure/database.py: the CLI needs a raw factory without
      the request-scoped error mapping of DatabaseSessionManager
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)


def create_session_factory(
    database_url: str,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an engine and async session factory for the given database URL.

    The engine is returned so callers can dispose of it when they are done.
    """
    engine = create_async_engine(database_url, echo=False)
    return engine, async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
