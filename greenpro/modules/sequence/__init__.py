"""Sequence module: atomic named counters for product, plant and EOI numbering."""

from greenpro.modules.sequence.allocator import SequenceAllocator
from greenpro.modules.sequence.constants import (
    PLANT_SEQUENCE,
    PRODUCT_SEQUENCE,
    eoi_sequence_name,
)

__all__ = [
    "PLANT_SEQUENCE",
    "PRODUCT_SEQUENCE",
    "SequenceAllocator",
    "eoi_sequence_name",
]
