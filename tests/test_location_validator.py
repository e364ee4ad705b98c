"""Tests for state/country matching and plant location validation."""

import pytest

from greenpro.exceptions import BadRequestException, NotFoundException
from greenpro.models.location import Country, State
from greenpro.modules.location.matchers import country_code_of, find_matching_strategy
from greenpro.modules.location.service import LocationService, LocationValidator

MISSING_ID = "65f0a1b2c3d4e5f6ffffffff"


@pytest.fixture
def validator(async_test_session) -> LocationValidator:
    return LocationValidator(LocationService(async_test_session))


class TestMatchers:
    def test_reference_id_checked_first(self):
        country = Country(id="a" * 24, country_name="India", legacy_id=101, country_code="IN")
        state = State(
            id="b" * 24, state_name="Goa", country_ref="a" * 24, legacy_country_id=101,
            country_code="IN",
        )
        assert find_matching_strategy(state, country).name == "reference_id"

    def test_legacy_country_id(self):
        country = Country(id="a" * 24, country_name="India", legacy_id=101)
        state = State(id="b" * 24, state_name="Goa", legacy_country_id=101)
        assert find_matching_strategy(state, country).name == "legacy_country_id"

    def test_country_code_prefers_legacy_code(self):
        country = Country(
            id="a" * 24, country_name="India", country_code="IND", legacy_country_code="IN"
        )
        state = State(id="b" * 24, state_name="Goa", country_code="IN")
        assert country_code_of(country) == "IN"
        assert find_matching_strategy(state, country).name == "country_code"

    def test_no_strategy_matches(self):
        country = Country(id="a" * 24, country_name="India", country_code="IN")
        state = State(id="b" * 24, state_name="Dubai", country_ref="c" * 24, country_code="AE")
        assert find_matching_strategy(state, country) is None

    def test_missing_values_never_match_each_other(self):
        country = Country(id="a" * 24, country_name="Nowhere")
        state = State(id="b" * 24, state_name="Limbo")
        assert find_matching_strategy(state, country) is None


class TestValidateState:
    @pytest.mark.asyncio
    async def test_modern_reference(self, validator, reference_data):
        state = await validator.validate_state(reference_data.maharashtra, reference_data.india)
        assert state.state_name == "Maharashtra"

    @pytest.mark.asyncio
    async def test_legacy_numeric_country_id(self, validator, reference_data):
        state = await validator.validate_state(reference_data.tamil_nadu, reference_data.india)
        assert state.state_name == "Tamil Nadu"

    @pytest.mark.asyncio
    async def test_country_code_only(self, validator, reference_data):
        state = await validator.validate_state(reference_data.karnataka, reference_data.india)
        assert state.state_name == "Karnataka"

    @pytest.mark.asyncio
    async def test_state_from_another_country(self, validator, reference_data):
        with pytest.raises(BadRequestException) as exc_info:
            await validator.validate_state(reference_data.dubai, reference_data.india)

        assert exc_info.value.message == (
            f"State with ID {reference_data.dubai} does not belong to "
            f"country with ID {reference_data.india}"
        )

    @pytest.mark.asyncio
    async def test_unknown_state(self, validator, reference_data):
        with pytest.raises(NotFoundException, match="State with ID"):
            await validator.validate_state(MISSING_ID, reference_data.india)

    @pytest.mark.asyncio
    async def test_unknown_country(self, validator, reference_data):
        with pytest.raises(NotFoundException, match="Country with ID"):
            await validator.validate_state(reference_data.maharashtra, MISSING_ID)

    @pytest.mark.asyncio
    async def test_validate_country(self, validator, reference_data):
        country = await validator.validate_country(reference_data.sri_lanka)
        assert country.country_name == "Sri Lanka"

        with pytest.raises(NotFoundException):
            await validator.validate_country(MISSING_ID)


class TestListStates:
    @pytest.mark.asyncio
    async def test_all_shapes_listed_for_country(self, async_test_session, reference_data):
        states = await LocationService(async_test_session).list_states(reference_data.india)

        assert [s.state_name for s in states] == ["Karnataka", "Maharashtra", "Tamil Nadu"]

    @pytest.mark.asyncio
    async def test_legacy_only_country(self, async_test_session, reference_data):
        states = await LocationService(async_test_session).list_states(reference_data.sri_lanka)

        assert [s.state_name for s in states] == ["Western Province"]

    @pytest.mark.asyncio
    async def test_all_states_without_filter(self, async_test_session, reference_data):
        states = await LocationService(async_test_session).list_states()
        assert len(states) == 5

    @pytest.mark.asyncio
    async def test_unknown_country(self, async_test_session, reference_data):
        with pytest.raises(NotFoundException):
            await LocationService(async_test_session).list_states(MISSING_ID)

    @pytest.mark.asyncio
    async def test_list_countries_sorted_by_name(self, async_test_session, reference_data):
        countries = await LocationService(async_test_session).list_countries()
        assert [c.country_name for c in countries] == [
            "India",
            "Sri Lanka",
            "United Arab Emirates",
        ]
