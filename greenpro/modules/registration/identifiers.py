"""Registration number (URN) and EOI code synthesis.

URN: ``settings.urn_prefix`` + current time as ``YYYYMMDDHHMMSS``. Purely
time-derived, so two registrations in the same second share a URN.

EOI: ``settings.eoi_prefix`` + manufacturer initial + 3-digit internal id +
3-digit sequence, e.g. ``GPMNG012006``. The sequence comes from the
per-manufacturer counter ``eoi:<manufacturer_id>``, which is seeded from the
manufacturer's existing product count the first time it is used and then
advanced atomically inside the registration transaction.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from zoneinfo import ZoneInfo

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from greenpro.config import settings
from greenpro.exceptions import BadRequestException
from greenpro.models.manufacturer import Manufacturer
from greenpro.models.product import Product
from greenpro.models.sequence_counter import SequenceCounter
from greenpro.modules.reference.service import ReferenceService
from greenpro.modules.registration.constants import (
    EOI_FALLBACK_INTERNAL_ID,
    EOI_INTERNAL_ID_WIDTH,
    EOI_SEQUENCE_WIDTH,
    INTERNAL_ID_REGEX,
    URN_TIMESTAMP_FORMAT,
)
from greenpro.modules.sequence.allocator import SequenceAllocator
from greenpro.modules.sequence.constants import eoi_sequence_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InternalId:
    """Zero-padded numeric part of a manufacturer's ``gp_internal_id``."""

    digits: str
    is_fallback: bool = False


def parse_internal_id(gp_internal_id: str) -> InternalId:
    """Extract the digits after the last hyphen ("GP-12" -> "012").

    Values without a trailing ``-<digits>`` group fall back to ``"000"``.
    """
    match = INTERNAL_ID_REGEX.search(gp_internal_id.strip())
    if match is None:
        logger.warning(
            "No internal ID pattern found in gp_internal_id %r, using %r",
            gp_internal_id,
            EOI_FALLBACK_INTERNAL_ID,
        )
        return InternalId(EOI_FALLBACK_INTERNAL_ID, is_fallback=True)
    return InternalId(match.group(1).zfill(EOI_INTERNAL_ID_WIDTH))


def format_urn(moment: datetime) -> str:
    return f"{settings.urn_prefix}{moment.strftime(URN_TIMESTAMP_FORMAT)}"


def format_eoi(manufacturer_initial: str, internal_id: InternalId, sequence: int) -> str:
    return (
        f"{settings.eoi_prefix}{manufacturer_initial}"
        f"{internal_id.digits}{str(sequence).zfill(EOI_SEQUENCE_WIDTH)}"
    )


def _default_clock() -> datetime:
    return datetime.now(ZoneInfo(settings.urn_timezone))


class IdentifierGenerator:
    def __init__(
        self,
        session: AsyncSession,
        references: ReferenceService,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._session = session
        self._references = references
        self._clock = clock or _default_clock

    def generate_urn(self) -> str:
        return format_urn(self._clock())

    async def reserve_eoi_sequences(self, manufacturer_id: str, count: int = 1) -> int:
        """Reserve *count* consecutive EOI sequence numbers; return the first.

        Runs in the caller's transaction, so concurrent registrations for the
        same manufacturer serialise on the counter row and an aborted
        registration gives its numbers back.
        """
        name = eoi_sequence_name(manufacturer_id)
        seed = 0
        if await self._session.get(SequenceCounter, name) is None:
            seed = await self.count_manufacturer_products(manufacturer_id)

        last = await SequenceAllocator.advance(self._session, name, step=count, seed=seed)
        return last - count + 1

    async def count_manufacturer_products(self, manufacturer_id: str) -> int:
        result = await self._session.execute(
            select(func.count())
            .select_from(Product)
            .where(Product.manufacturer_id == manufacturer_id)
        )
        return result.scalar_one()

    async def generate_eoi(self, manufacturer_id: str, sequence: int) -> str:
        manufacturer = await self._references.get_manufacturer(manufacturer_id)
        initial = self._require_initial(manufacturer)
        internal_id = parse_internal_id(self._require_internal_id(manufacturer))
        return format_eoi(initial, internal_id, sequence)

    @staticmethod
    def _require_initial(manufacturer: Manufacturer) -> str:
        initial = (manufacturer.manufacturer_initial or "").strip()
        if not initial:
            raise BadRequestException(
                f"Manufacturer {manufacturer.id} does not have manufacturer_initial set. "
                "Please update the manufacturer record with the manufacturer_initial field."
            )
        return initial

    @staticmethod
    def _require_internal_id(manufacturer: Manufacturer) -> str:
        gp_internal_id = (manufacturer.gp_internal_id or "").strip()
        if not gp_internal_id:
            raise BadRequestException(
                f"Manufacturer {manufacturer.id} does not have gp_internal_id set. "
                "Please update the manufacturer record with the gp_internal_id field "
                '(format: "GP-12" or "GPSC-312").'
            )
        return gp_internal_id
