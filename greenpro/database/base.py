"""Declarative base and shared column mixins."""

from __future__ import annotations

import secrets
from datetime import UTC, datetime

from sqlalchemy import DateTime, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

# Document ids are 24 lowercase hex characters (12 random bytes).
HEX_ID_LENGTH = 24


def generate_hex_id() -> str:
    return secrets.token_hex(HEX_ID_LENGTH // 2)


def utcnow() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    pass


class HexIdPrimaryKeyMixin:
    id: Mapped[str] = mapped_column(
        String(HEX_ID_LENGTH), primary_key=True, default=generate_hex_id
    )


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        server_default=func.now(),
        nullable=False,
    )
