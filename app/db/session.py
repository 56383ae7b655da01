"""Async engine, session factory and table creation"""
from typing import AsyncIterator
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from app.core.config import settings
from app.db.base import metadata
from app.db.models.user import users_table  # noqa: F401  registers the users mapping
from app.utils.logger import get_logger

logger = get_logger("db")

engine: AsyncEngine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Records handed back to callers must stay readable after commit
SessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_session() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one session per request"""
    async with SessionLocal() as session:
        yield session


async def create_tables(bind: AsyncEngine = engine) -> None:
    """Create missing tables for every mapped model"""
    async with bind.begin() as conn:
        await conn.run_sync(metadata.create_all)
    logger.info(f"Database schema ready ({', '.join(sorted(metadata.tables))})")


async def ping(session: AsyncSession) -> bool:
    """Round-trip a trivial query; False when the database is unreachable"""
    try:
        await session.execute(text("SELECT 1"))
    except Exception as e:
        logger.warning(f"Database ping failed: {str(e)}")
        return False
    return True
