from __future__ import annotations

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from greenpro.database.base import Base, HexIdPrimaryKeyMixin, TimestampMixin


class Vendor(HexIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "vendors"

    vendor_name: Mapped[str] = mapped_column(String(255), nullable=False)
    vendor_email: Mapped[str | None] = mapped_column(String(255))
    manufacturer_id: Mapped[str | None] = mapped_column(
        String(24), ForeignKey("manufacturers.id")
    )
    vendor_status: Mapped[int] = mapped_column(Integer, server_default="1", nullable=False)
