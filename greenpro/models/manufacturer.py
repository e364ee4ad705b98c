from __future__ import annotations

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from greenpro.database.base import Base, HexIdPrimaryKeyMixin, TimestampMixin


class Manufacturer(HexIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "manufacturers"

    manufacturer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    # External identifier of the form PREFIX-NNN, e.g. "GPSC-312"
    gp_internal_id: Mapped[str | None] = mapped_column(String(50), unique=True)
    manufacturer_initial: Mapped[str | None] = mapped_column(String(20))
    manufacturer_status: Mapped[int] = mapped_column(Integer, server_default="1", nullable=False)
    manufacturer_image: Mapped[str | None] = mapped_column(String(500))
