from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from greenpro.database.base import Base, HexIdPrimaryKeyMixin, TimestampMixin


class Category(HexIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "categories"

    category_name: Mapped[str] = mapped_column(String(255), nullable=False)
    category_image: Mapped[str | None] = mapped_column(String(500))
    category_status: Mapped[int] = mapped_column(Integer, server_default="1", nullable=False)
