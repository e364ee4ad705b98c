from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greenpro.database.base import Base, HexIdPrimaryKeyMixin, utcnow

if TYPE_CHECKING:
    from greenpro.models.product import Product


class ProductPlant(HexIdPrimaryKeyMixin, Base):
    __tablename__ = "product_plants"

    product_plant_id: Mapped[int] = mapped_column(BigInteger, unique=True, nullable=False)
    product_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("products.id", ondelete="CASCADE"), nullable=False
    )
    vendor_id: Mapped[str] = mapped_column(String(24), ForeignKey("vendors.id"), nullable=False)
    category_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("categories.id"), nullable=False
    )
    manufacturer_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("manufacturers.id"), nullable=False
    )
    # Copied from the owning product at registration time
    urn_no: Mapped[str] = mapped_column(String(50), nullable=False)
    eoi_no: Mapped[str] = mapped_column(String(50), nullable=False)
    plant_name: Mapped[str] = mapped_column(String(255), nullable=False)
    plant_location: Mapped[str] = mapped_column(String(500), nullable=False)
    country_id: Mapped[str] = mapped_column(String(24), ForeignKey("countries.id"), nullable=False)
    state_id: Mapped[str] = mapped_column(String(24), ForeignKey("states.id"), nullable=False)
    city: Mapped[str] = mapped_column(String(255), nullable=False)
    plant_status: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, server_default=func.now(), nullable=False
    )

    # Relationships
    product: Mapped[Product] = relationship("Product", back_populates="plants")

    __table_args__ = (
        Index("ix_product_plants_product_id", "product_id"),
    )
