"""Create reference, product registration and sequence counter tables

Revision ID: 001
Revises:
Create Date: 2026-10-19

Creates: manufacturers, vendors, categories, countries, states,
         sequence_counters, products, product_plants
"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def _id_column() -> sa.Column:
    return sa.Column("id", sa.String(24), primary_key=True)


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    ]


def upgrade() -> None:
    # ── 1. Reference data (owned by other services, read-only here) ──────
    op.create_table(
        "manufacturers",
        _id_column(),
        sa.Column("manufacturer_name", sa.String(255), nullable=False),
        sa.Column("gp_internal_id", sa.String(50), nullable=True, unique=True),
        sa.Column("manufacturer_initial", sa.String(20), nullable=True),
        sa.Column("manufacturer_status", sa.Integer, server_default="1", nullable=False),
        sa.Column("manufacturer_image", sa.String(500), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "vendors",
        _id_column(),
        sa.Column("vendor_name", sa.String(255), nullable=False),
        sa.Column("vendor_email", sa.String(255), nullable=True),
        sa.Column("manufacturer_id", sa.String(24), sa.ForeignKey("manufacturers.id"), nullable=True),
        sa.Column("vendor_status", sa.Integer, server_default="1", nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "categories",
        _id_column(),
        sa.Column("category_name", sa.String(255), nullable=False),
        sa.Column("category_image", sa.String(500), nullable=True),
        sa.Column("category_status", sa.Integer, server_default="1", nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "countries",
        _id_column(),
        sa.Column("country_name", sa.String(255), nullable=False),
        sa.Column("country_code", sa.String(10), nullable=True),
        sa.Column("legacy_id", sa.Integer, nullable=True, unique=True),
        sa.Column("legacy_country_code", sa.String(10), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "states",
        _id_column(),
        sa.Column("state_name", sa.String(255), nullable=False),
        sa.Column("state_code", sa.String(10), nullable=True),
        sa.Column("country_ref", sa.String(24), sa.ForeignKey("countries.id"), nullable=True),
        sa.Column("legacy_country_id", sa.Integer, nullable=True),
        sa.Column("country_code", sa.String(10), nullable=True),
        sa.Column("country_name", sa.String(255), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_states_country_ref", "states", ["country_ref"])
    op.create_index("ix_states_legacy_country_id", "states", ["legacy_country_id"])
    op.create_index("ix_states_country_code", "states", ["country_code"])

    # ── 2. Sequence counters: "product", "plant", "eoi:<manufacturer_id>" ─
    op.create_table(
        "sequence_counters",
        sa.Column("name", sa.String(100), primary_key=True),
        sa.Column("value", sa.BigInteger, server_default="0", nullable=False),
    )

    # ── 3. Products and their plants ──────────────────────────────────────
    op.create_table(
        "products",
        _id_column(),
        sa.Column("product_id", sa.BigInteger, nullable=False, unique=True),
        sa.Column("category_id", sa.String(24), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("vendor_id", sa.String(24), sa.ForeignKey("vendors.id"), nullable=False),
        sa.Column("manufacturer_id", sa.String(24), sa.ForeignKey("manufacturers.id"), nullable=False),
        sa.Column("eoi_no", sa.String(50), nullable=False),
        sa.Column("urn_no", sa.String(50), nullable=False),
        sa.Column("product_name", sa.String(500), nullable=False),
        sa.Column("product_image", sa.String(500), nullable=True),
        sa.Column("product_details", sa.Text, nullable=True),
        sa.Column("plant_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("product_type", sa.Integer, nullable=False, server_default="0"),
        sa.Column("product_status", sa.Integer, nullable=False, server_default="0"),
        sa.Column("product_renew_status", sa.Integer, nullable=False, server_default="0"),
        sa.Column("urn_status", sa.Integer, nullable=False, server_default="0"),
        sa.Column("renewed_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("assessment_report_url", sa.String(500), nullable=True),
        sa.Column("rejected_details", sa.Text, nullable=True),
        sa.Column("certified_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("validtill_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("first_notify_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("second_notify_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("third_notify_date", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_products_manufacturer_id", "products", ["manufacturer_id"])
    op.create_index("ix_products_vendor_id", "products", ["vendor_id"])
    op.create_index("ix_products_eoi_no", "products", ["eoi_no"])
    op.create_index("ix_products_urn_no", "products", ["urn_no"])

    op.create_table(
        "product_plants",
        _id_column(),
        sa.Column("product_plant_id", sa.BigInteger, nullable=False, unique=True),
        sa.Column("product_id", sa.String(24), sa.ForeignKey("products.id", ondelete="CASCADE"), nullable=False),
        sa.Column("vendor_id", sa.String(24), sa.ForeignKey("vendors.id"), nullable=False),
        sa.Column("category_id", sa.String(24), sa.ForeignKey("categories.id"), nullable=False),
        sa.Column("manufacturer_id", sa.String(24), sa.ForeignKey("manufacturers.id"), nullable=False),
        sa.Column("urn_no", sa.String(50), nullable=False),
        sa.Column("eoi_no", sa.String(50), nullable=False),
        sa.Column("plant_name", sa.String(255), nullable=False),
        sa.Column("plant_location", sa.String(500), nullable=False),
        sa.Column("country_id", sa.String(24), sa.ForeignKey("countries.id"), nullable=False),
        sa.Column("state_id", sa.String(24), sa.ForeignKey("states.id"), nullable=False),
        sa.Column("city", sa.String(255), nullable=False),
        sa.Column("plant_status", sa.Integer, nullable=False, server_default="1"),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False),
    )
    op.create_index("ix_product_plants_product_id", "product_plants", ["product_id"])


def downgrade() -> None:
    op.drop_table("product_plants")
    op.drop_table("products")
    op.drop_table("sequence_counters")
    op.drop_table("states")
    op.drop_table("countries")
    op.drop_table("categories")
    op.drop_table("vendors")
    op.drop_table("manufacturers")
