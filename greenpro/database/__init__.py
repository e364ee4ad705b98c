from greenpro.database.base import Base, HexIdPrimaryKeyMixin, TimestampMixin, generate_hex_id
from greenpro.database.engine import (
    async_session,
    engine,
    sequence_engine,
    sequence_session,
    sync_engine,
)
from greenpro.database.session import get_db, get_session_factory

__all__ = [
    "Base",
    "HexIdPrimaryKeyMixin",
    "TimestampMixin",
    "generate_hex_id",
    "async_session",
    "engine",
    "sequence_engine",
    "sequence_session",
    "sync_engine",
    "get_db",
    "get_session_factory",
]
