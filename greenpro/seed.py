"""Database seeder for GreenPro: populates reference data for local development.

Run via: python -m greenpro.seed
"""

from sqlalchemy import text
from sqlalchemy.orm import Session

from greenpro.database.engine import sync_engine
from greenpro.seed_data.reference import (
    CATEGORIES,
    COUNTRIES,
    MANUFACTURERS,
    STATES,
    VENDORS,
)

# ---------------------------------------------------------------------------
# Seed functions
# ---------------------------------------------------------------------------


def seed_countries(session: Session) -> None:
    for country in COUNTRIES:
        session.execute(
            text("""
                INSERT INTO countries (id, country_name, country_code, legacy_id, legacy_country_code)
                VALUES (:id, :country_name, :country_code, :legacy_id, :legacy_country_code)
                ON CONFLICT (id) DO UPDATE SET
                    country_name = EXCLUDED.country_name,
                    country_code = EXCLUDED.country_code,
                    legacy_id = EXCLUDED.legacy_id,
                    legacy_country_code = EXCLUDED.legacy_country_code
            """),
            country,
        )
    print(f"  Seeded {len(COUNTRIES)} countries.")


def seed_states(session: Session) -> None:
    for state in STATES:
        session.execute(
            text("""
                INSERT INTO states (id, state_name, state_code, country_ref, legacy_country_id, country_code)
                VALUES (:id, :state_name, :state_code, :country_ref, :legacy_country_id, :country_code)
                ON CONFLICT (id) DO UPDATE SET
                    state_name = EXCLUDED.state_name,
                    state_code = EXCLUDED.state_code,
                    country_ref = EXCLUDED.country_ref,
                    legacy_country_id = EXCLUDED.legacy_country_id,
                    country_code = EXCLUDED.country_code
            """),
            state,
        )
    print(f"  Seeded {len(STATES)} states.")


def seed_manufacturers(session: Session) -> None:
    for manufacturer in MANUFACTURERS:
        session.execute(
            text("""
                INSERT INTO manufacturers (id, manufacturer_name, gp_internal_id, manufacturer_initial)
                VALUES (:id, :manufacturer_name, :gp_internal_id, :manufacturer_initial)
                ON CONFLICT (id) DO UPDATE SET
                    manufacturer_name = EXCLUDED.manufacturer_name,
                    gp_internal_id = EXCLUDED.gp_internal_id,
                    manufacturer_initial = EXCLUDED.manufacturer_initial
            """),
            manufacturer,
        )
    print(f"  Seeded {len(MANUFACTURERS)} manufacturers.")


def seed_vendors(session: Session) -> None:
    for vendor in VENDORS:
        session.execute(
            text("""
                INSERT INTO vendors (id, vendor_name, vendor_email, manufacturer_id)
                VALUES (:id, :vendor_name, :vendor_email, :manufacturer_id)
                ON CONFLICT (id) DO UPDATE SET
                    vendor_name = EXCLUDED.vendor_name,
                    vendor_email = EXCLUDED.vendor_email,
                    manufacturer_id = EXCLUDED.manufacturer_id
            """),
            vendor,
        )
    print(f"  Seeded {len(VENDORS)} vendors.")


def seed_categories(session: Session) -> None:
    for category in CATEGORIES:
        session.execute(
            text("""
                INSERT INTO categories (id, category_name)
                VALUES (:id, :category_name)
                ON CONFLICT (id) DO UPDATE SET category_name = EXCLUDED.category_name
            """),
            category,
        )
    print(f"  Seeded {len(CATEGORIES)} categories.")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    """Run all seed functions inside a single transaction."""
    print("Seeding GreenPro database...")

    with Session(sync_engine) as session:
        with session.begin():
            # 1. Countries, then states (FK → countries)
            seed_countries(session)
            seed_states(session)

            # 2. Manufacturers, then vendors (FK → manufacturers)
            seed_manufacturers(session)
            seed_vendors(session)

            # 3. Categories
            seed_categories(session)

    print("Seeding complete.")


if __name__ == "__main__":
    main()
