"""Tests for URN and EOI generation."""

from datetime import datetime, timezone

import pytest

from greenpro.exceptions import BadRequestException, NotFoundException
from greenpro.models.manufacturer import Manufacturer
from greenpro.models.product import Product
from greenpro.modules.reference.service import ReferenceService
from greenpro.modules.registration.identifiers import (
    IdentifierGenerator,
    InternalId,
    format_eoi,
    format_urn,
    parse_internal_id,
)


def _generator(session, clock=None) -> IdentifierGenerator:
    return IdentifierGenerator(session, ReferenceService(session), clock=clock)


class TestParseInternalId:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("GP-12", "012"),
            ("GPSC-312", "312"),
            ("GP-7", "007"),
            ("GP-1234", "1234"),
            ("  GP-45  ", "045"),
        ],
    )
    def test_digits_after_last_hyphen(self, raw, expected):
        parsed = parse_internal_id(raw)
        assert parsed.digits == expected
        assert parsed.is_fallback is False

    @pytest.mark.parametrize("raw", ["GP12", "GP-", "GP-12A", "nonsense"])
    def test_unparseable_falls_back_to_zeros(self, raw):
        assert parse_internal_id(raw) == InternalId("000", is_fallback=True)


class TestFormatting:
    def test_urn_uses_second_resolution_timestamp(self):
        moment = datetime(2024, 3, 15, 10, 30, 45, 999_000, tzinfo=timezone.utc)
        assert format_urn(moment) == "URN-20240315103045"

    def test_eoi_pads_internal_id_and_sequence(self):
        assert format_eoi("MNG", InternalId("012"), 6) == "GPMNG012006"
        assert format_eoi("ABC", InternalId("312"), 1) == "GPABC312001"

    def test_eoi_sequence_above_three_digits_is_not_truncated(self):
        assert format_eoi("ABC", InternalId("312"), 1000) == "GPABC3121000"


class TestIdentifierGenerator:
    @pytest.mark.asyncio
    async def test_generate_urn_uses_clock(self, async_test_session, step_clock):
        generator = _generator(async_test_session, clock=step_clock)

        assert generator.generate_urn() == "URN-20240315103045"
        assert generator.generate_urn() == "URN-20240315103046"

    @pytest.mark.asyncio
    async def test_generate_eoi(self, async_test_session, reference_data):
        generator = _generator(async_test_session)

        assert await generator.generate_eoi(reference_data.abc, 1) == "GPABC312001"
        assert await generator.generate_eoi(reference_data.mangal, 6) == "GPMNG012006"

    @pytest.mark.asyncio
    async def test_generate_eoi_unknown_manufacturer(self, async_test_session, reference_data):
        generator = _generator(async_test_session)

        with pytest.raises(NotFoundException, match="Manufacturer not found"):
            await generator.generate_eoi("65f0a1b2c3d4e5f6030000ff", 1)

    @pytest.mark.asyncio
    async def test_generate_eoi_requires_initial(self, async_test_session):
        manufacturer = Manufacturer(manufacturer_name="No Initial", gp_internal_id="GP-9")
        async_test_session.add(manufacturer)
        await async_test_session.commit()

        with pytest.raises(BadRequestException, match="manufacturer_initial"):
            await _generator(async_test_session).generate_eoi(manufacturer.id, 1)

    @pytest.mark.asyncio
    async def test_generate_eoi_requires_internal_id(self, async_test_session):
        manufacturer = Manufacturer(manufacturer_name="No Internal Id", manufacturer_initial="NII")
        async_test_session.add(manufacturer)
        await async_test_session.commit()

        with pytest.raises(BadRequestException, match="gp_internal_id"):
            await _generator(async_test_session).generate_eoi(manufacturer.id, 1)

    @pytest.mark.asyncio
    async def test_generate_eoi_with_unparseable_internal_id(self, async_test_session):
        manufacturer = Manufacturer(
            manufacturer_name="Legacy Co", gp_internal_id="LEGACY", manufacturer_initial="LEG"
        )
        async_test_session.add(manufacturer)
        await async_test_session.commit()

        assert await _generator(async_test_session).generate_eoi(manufacturer.id, 2) == "GPLEG000002"


class TestReserveEoiSequences:
    @pytest.mark.asyncio
    async def test_first_reservation_counts_existing_products(
        self, async_test_session, reference_data
    ):
        for n in range(5):
            async_test_session.add(
                Product(
                    product_id=100 + n,
                    category_id=reference_data.solar_panels,
                    vendor_id=reference_data.mangal_vendor,
                    manufacturer_id=reference_data.mangal,
                    eoi_no=f"GPMNG01200{n + 1}",
                    urn_no="URN-20240101000000",
                    product_name=f"Legacy panel {n}",
                )
            )
        await async_test_session.commit()
        generator = _generator(async_test_session)

        assert await generator.reserve_eoi_sequences(reference_data.mangal) == 6
        assert await generator.reserve_eoi_sequences(reference_data.mangal) == 7

    @pytest.mark.asyncio
    async def test_block_reservation_returns_first_number(self, async_test_session, reference_data):
        generator = _generator(async_test_session)

        assert await generator.reserve_eoi_sequences(reference_data.abc, count=3) == 1
        assert await generator.reserve_eoi_sequences(reference_data.abc, count=2) == 4

    @pytest.mark.asyncio
    async def test_manufacturers_have_separate_counters(self, async_test_session, reference_data):
        generator = _generator(async_test_session)

        assert await generator.reserve_eoi_sequences(reference_data.abc) == 1
        assert await generator.reserve_eoi_sequences(reference_data.mangal) == 1
        assert await generator.reserve_eoi_sequences(reference_data.abc) == 2
