"""Counter names used by the sequence allocator."""

PRODUCT_SEQUENCE = "product"
PLANT_SEQUENCE = "plant"

# Per-manufacturer EOI counters are named "eoi:<manufacturer_id>"
EOI_SEQUENCE_PREFIX = "eoi:"


def eoi_sequence_name(manufacturer_id: str) -> str:
    return f"{EOI_SEQUENCE_PREFIX}{manufacturer_id}"
