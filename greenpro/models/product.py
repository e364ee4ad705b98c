from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import BigInteger, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from greenpro.database.base import Base, HexIdPrimaryKeyMixin, TimestampMixin

if TYPE_CHECKING:
    from greenpro.models.product_plant import ProductPlant


class Product(HexIdPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "products"

    product_id: Mapped[int] = mapped_column(BigInteger, unique=True, nullable=False)
    category_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("categories.id"), nullable=False
    )
    vendor_id: Mapped[str] = mapped_column(String(24), ForeignKey("vendors.id"), nullable=False)
    manufacturer_id: Mapped[str] = mapped_column(
        String(24), ForeignKey("manufacturers.id"), nullable=False
    )
    eoi_no: Mapped[str] = mapped_column(String(50), nullable=False)
    urn_no: Mapped[str] = mapped_column(String(50), nullable=False)
    product_name: Mapped[str] = mapped_column(String(500), nullable=False)
    product_image: Mapped[str | None] = mapped_column(String(500))
    product_details: Mapped[str | None] = mapped_column(Text)
    plant_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    product_type: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    product_status: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    product_renew_status: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    urn_status: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    # Certification lifecycle, maintained by the back office
    renewed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    assessment_report_url: Mapped[str | None] = mapped_column(String(500))
    rejected_details: Mapped[str | None] = mapped_column(Text)
    certified_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    validtill_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    first_notify_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    second_notify_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    third_notify_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    plants: Mapped[list[ProductPlant]] = relationship(
        "ProductPlant",
        back_populates="product",
        cascade="all, delete-orphan",
        order_by="ProductPlant.product_plant_id",
    )

    __table_args__ = (
        Index("ix_products_manufacturer_id", "manufacturer_id"),
        Index("ix_products_vendor_id", "vendor_id"),
        Index("ix_products_eoi_no", "eoi_no"),
        Index("ix_products_urn_no", "urn_no"),
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} product_id={self.product_id} eoi={self.eoi_no}>"
