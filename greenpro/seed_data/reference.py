"""
Reference data for local development.
Countries and states come in both the modern and the legacy shape so that
every state-to-country matching strategy has something to match.
"""

COUNTRIES = [
    {
        "id": "65f0a1b2c3d4e5f601000001",
        "country_name": "India",
        "country_code": "IN",
        "legacy_id": 101,
        "legacy_country_code": "IN",
    },
    {
        "id": "65f0a1b2c3d4e5f601000002",
        "country_name": "Sri Lanka",
        "country_code": "LK",
        "legacy_id": 206,
        "legacy_country_code": None,
    },
    {
        "id": "65f0a1b2c3d4e5f601000003",
        "country_name": "United Arab Emirates",
        "country_code": "AE",
        "legacy_id": None,
        "legacy_country_code": None,
    },
]

STATES = [
    # ── Modern rows: linked by country reference ───────────────────────────
    {
        "id": "65f0a1b2c3d4e5f602000001",
        "state_name": "Maharashtra",
        "state_code": "MH",
        "country_ref": "65f0a1b2c3d4e5f601000001",
        "legacy_country_id": None,
        "country_code": None,
    },
    {
        "id": "65f0a1b2c3d4e5f602000002",
        "state_name": "Dubai",
        "state_code": "DU",
        "country_ref": "65f0a1b2c3d4e5f601000003",
        "legacy_country_id": None,
        "country_code": None,
    },
    # ── Legacy rows: numeric country id only ────────────────────────────────
    {
        "id": "65f0a1b2c3d4e5f602000003",
        "state_name": "Tamil Nadu",
        "state_code": "TN",
        "country_ref": None,
        "legacy_country_id": 101,
        "country_code": None,
    },
    {
        "id": "65f0a1b2c3d4e5f602000004",
        "state_name": "Western Province",
        "state_code": "WP",
        "country_ref": None,
        "legacy_country_id": 206,
        "country_code": None,
    },
    # ── Legacy rows: country code only ──────────────────────────────────────
    {
        "id": "65f0a1b2c3d4e5f602000005",
        "state_name": "Karnataka",
        "state_code": "KA",
        "country_ref": None,
        "legacy_country_id": None,
        "country_code": "IN",
    },
]

MANUFACTURERS = [
    {
        "id": "65f0a1b2c3d4e5f603000001",
        "manufacturer_name": "Mangal Green Industries",
        "gp_internal_id": "GP-12",
        "manufacturer_initial": "MNG",
    },
    {
        "id": "65f0a1b2c3d4e5f603000002",
        "manufacturer_name": "ABC Solar Components",
        "gp_internal_id": "GPSC-312",
        "manufacturer_initial": "ABC",
    },
]

VENDORS = [
    {
        "id": "65f0a1b2c3d4e5f604000001",
        "vendor_name": "Mangal Green Vendor Desk",
        "vendor_email": "vendor@mangalgreen.in",
        "manufacturer_id": "65f0a1b2c3d4e5f603000001",
    },
    {
        "id": "65f0a1b2c3d4e5f604000002",
        "vendor_name": "ABC Solar Sales",
        "vendor_email": "sales@abcsolar.in",
        "manufacturer_id": "65f0a1b2c3d4e5f603000002",
    },
]

CATEGORIES = [
    {"id": "65f0a1b2c3d4e5f605000001", "category_name": "Solar Panels"},
    {"id": "65f0a1b2c3d4e5f605000002", "category_name": "Building Materials"},
    {"id": "65f0a1b2c3d4e5f605000003", "category_name": "Paints and Coatings"},
]
