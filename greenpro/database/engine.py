"""Database engines and session factories."""

from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from greenpro.config import settings

engine = create_async_engine(
    settings.database_url,
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    pool_pre_ping=True,
    pool_recycle=3600,
    echo=settings.db_echo,
)

# Products are serialised after the registration service has committed
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

# Sequence allocation commits outside the request transaction and must never
# draw from the request pool
sequence_engine = create_async_engine(
    settings.database_url,
    pool_size=settings.sequence_pool_size,
    max_overflow=settings.sequence_max_overflow,
    pool_pre_ping=True,
    pool_recycle=3600,
    echo=settings.db_echo,
)

sequence_session = async_sessionmaker(
    sequence_engine, class_=AsyncSession, expire_on_commit=False
)

# Used by the reference-data seeder
sync_engine = create_engine(settings.database_url_sync, pool_size=2, pool_pre_ping=True)
