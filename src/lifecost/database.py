import logging
import os
from typing import Optional

from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import declarative_base, sessionmaker

# Cloud Run injects its configuration; only local runs read a .env file.
if not os.getenv("GOOGLE_CLOUD_PROJECT"):
    load_dotenv()

logger = logging.getLogger(__name__)

Base = declarative_base()


def _cloud_sql_url() -> str:
    """asyncpg URL over the Cloud SQL unix socket."""
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASS")
    name = os.getenv("DB_NAME")
    instance = os.getenv("CLOUD_SQL_CONNECTION_NAME")
    return f"postgresql+asyncpg://{user}:{password}@/{name}?host=/cloudsql/{instance}"


def get_database_url() -> Optional[str]:
    if os.getenv("GOOGLE_CLOUD_PROJECT"):
        return _cloud_sql_url()
    return os.getenv("DATABASE_URL")


_engine = None
_session_factory = None


def get_engine():
    """
    Engine, created on first use so the API can serve the bundled catalog
    without any database configured.
    Raises RuntimeError when no database URL is available.
    """
    global _engine
    if _engine is None:
        url = get_database_url()
        if url is None:
            raise RuntimeError("Database configuration missing")
        _engine = create_async_engine(url, echo=False)
        logger.info("Database engine created")
    return _engine


def get_sessionmaker():
    global _session_factory
    if _session_factory is None:
        _session_factory = sessionmaker(
            bind=get_engine(),
            class_=AsyncSession,
            autoflush=False,
            expire_on_commit=False,
        )
    return _session_factory


async def get_db():
    """FastAPI dependency yielding one AsyncSession per request."""
    async with get_sessionmaker()() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
