"""Country and State reference models.

Both tables carry legacy columns imported from the previous platform: a
numeric country id and a string country code. States may reference their
country through any of them, so every shape must stay queryable.
"""

from __future__ import annotations

from sqlalchemy import ForeignKey, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from greenpro.database.base import Base, HexIdPrimaryKeyMixin, TimestampMixin


class Country(HexIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "countries"

    country_name: Mapped[str] = mapped_column(String(255), nullable=False)
    country_code: Mapped[str | None] = mapped_column(String(10))
    # Legacy shape
    legacy_id: Mapped[int | None] = mapped_column(Integer, unique=True)
    legacy_country_code: Mapped[str | None] = mapped_column(String(10))


class State(HexIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "states"

    state_name: Mapped[str] = mapped_column(String(255), nullable=False)
    state_code: Mapped[str | None] = mapped_column(String(10))
    country_ref: Mapped[str | None] = mapped_column(String(24), ForeignKey("countries.id"))
    # Legacy shape
    legacy_country_id: Mapped[int | None] = mapped_column(Integer)
    country_code: Mapped[str | None] = mapped_column(String(10))
    country_name: Mapped[str | None] = mapped_column(String(255))

    __table_args__ = (
        Index("ix_states_country_ref", "country_ref"),
        Index("ix_states_legacy_country_id", "legacy_country_id"),
        Index("ix_states_country_code", "country_code"),
    )
