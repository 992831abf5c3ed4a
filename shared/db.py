# shared/db.py
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from shared import config
from shared.logger import get_logger

log = get_logger("db")

engine = create_async_engine(config.DATABASE_URL, echo=config.DB_ECHO, pool_pre_ping=True)

AsyncSessionLocal: async_sessionmaker[AsyncSession] = async_sessionmaker(
    bind=engine,
    expire_on_commit=False,
    class_=AsyncSession,
)

Base = declarative_base()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """One session per request; rolled back if the request raised."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def init_models(bind=None):
    # Import models so they are registered with Base.metadata
    import services.school_details.models  # noqa: F401

    async with (bind if bind is not None else engine).begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    log.info("Tables created")


async def drop_models(bind=None):
    import services.school_details.models  # noqa: F401

    async with (bind if bind is not None else engine).begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    log.info("Tables dropped")
