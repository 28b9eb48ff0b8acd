"""
Database configuration with async support
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from app.core.config import Settings, settings

# Configure logging based on environment
logging.basicConfig(
    level=settings.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class Database:
    """
    Owns the async engine and the session factory for one application instance.

    Built by `create_app` and handed to request handlers through `get_db`.
    """

    def __init__(self, url: str, echo: bool = False, **engine_kwargs):
        self.url = url
        self.is_sqlite = url.startswith("sqlite")

        if not self.is_sqlite:
            engine_kwargs.setdefault("pool_size", 20)  # Number of connections to maintain
            engine_kwargs.setdefault("max_overflow", 30)  # Additional connections that can be created
            engine_kwargs.setdefault("pool_pre_ping", True)  # Verify connections before use
            engine_kwargs.setdefault("pool_recycle", 3600)  # Recycle connections after 1 hour

        self.engine = create_async_engine(url, echo=echo, **engine_kwargs)

        if self.is_sqlite:
            # SQLite ignores foreign keys unless asked on every connection
            event.listen(self.engine.sync_engine, "connect", _enable_sqlite_foreign_keys)

        self.session_factory = sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False
        )

    @classmethod
    def from_settings(cls, config: Settings) -> "Database":
        return cls(config.SQLALCHEMY_DATABASE_URL, echo=config.SQL_ECHO)

    def session(self) -> AsyncSession:
        return self.session_factory()

    async def init_models(self) -> None:
        """Create any missing tables"""
        # Register every table on the metadata before create_all
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Async database session dependency
    Usage:
    async def some_endpoint(db: AsyncSession = Depends(get_db)):
        async with db.begin():
            ...
    """
    database: Database = request.app.state.db
    async with database.session() as session:
        yield session
