from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine, AsyncSession
from sqlalchemy.orm import DeclarativeBase

from watchdog_checks.config.settings import settings

engine = create_async_engine(
    url=settings.db.DATABASE_URL,
    echo=settings.debug_mode,
    pool_size=10,
    max_overflow=20,
    pool_timeout=10,
    pool_recycle=1800,
    pool_pre_ping=True
)

async_session_factory = async_sessionmaker(engine, expire_on_commit=False)

# Base class for all our ORM models
# SQLAlchemy uses it to collect metadata about tables
class Base(DeclarativeBase):
    pass


async def create_tables() -> None:
    # Importing the models registers them on Base.metadata
    from watchdog_checks.models import check  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    async with async_session_factory() as session:
        yield session


# Create a type alias for the session dependency
DBSession = Annotated[AsyncSession, Depends(get_async_session)]
