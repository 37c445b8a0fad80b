# edumanage/core/database.py
"""Database engine and session management using SQLAlchemy."""
import threading
from typing import AsyncGenerator, Optional
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import AsyncAdaptedQueuePool
from sqlalchemy import text
import logging

from .config import settings

logger = logging.getLogger(__name__)

# Process-wide engine, created on first use. Serverless hosts keep a single
# connection per process so the pool is capped at one with no overflow.
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None
_engine_lock = threading.Lock()


def get_engine() -> AsyncEngine:
    """Return the shared engine, creating it at most once."""
    global _engine, _session_factory
    if _engine is None:
        with _engine_lock:
            if _engine is None:
                engine = create_async_engine(
                    settings.database_url,
                    poolclass=AsyncAdaptedQueuePool,
                    pool_size=1,
                    max_overflow=0,
                    pool_timeout=30,
                    pool_recycle=1800,
                    pool_pre_ping=True,
                    echo=(settings.environment == 'development' and settings.log_level == 'debug'),
                )
                _session_factory = async_sessionmaker(
                    engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                    autoflush=False,
                )
                _engine = engine
                logger.info("Database engine initialized")
    return _engine


def get_session_factory() -> async_sessionmaker:
    get_engine()
    return _session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session for API requests with proper error handling"""
    async with get_session_factory()() as session:
        try:
            yield session
        except Exception as e:
            logger.error(f"Database session error: {e}")
            await session.rollback()
            raise


async def health_check_db(engine: Optional[AsyncEngine] = None) -> bool:
    """Run a trivial query to confirm the database answers"""
    try:
        async with (engine or get_engine()).connect() as conn:
            await conn.execute(text("SELECT 1"))
            return True
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False


async def init_models():
    """Create all tables known to the metadata"""
    from ..models import Base

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ensured")


async def close_db_connections():
    """Dispose the engine if it was ever created"""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database connections closed")
