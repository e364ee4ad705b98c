"""Country/state lookups and plant location validation."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from greenpro.exceptions import BadRequestException, NotFoundException
from greenpro.models.location import Country, State
from greenpro.modules.location.matchers import find_matching_strategy, states_of_country_clause

logger = logging.getLogger(__name__)


class LocationService:
    """Read-only access to the country and state reference tables."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_country(self, country_id: str) -> Country | None:
        return await self._session.get(Country, country_id)

    async def find_state(self, state_id: str) -> State | None:
        return await self._session.get(State, state_id)

    async def list_countries(self) -> list[Country]:
        result = await self._session.execute(select(Country).order_by(Country.country_name))
        return list(result.scalars().all())

    async def list_states(self, country_id: str | None = None) -> list[State]:
        stmt = select(State).order_by(State.state_name)
        if country_id is not None:
            country = await self.find_country(country_id)
            if country is None:
                raise NotFoundException(f"Country with ID {country_id} not found")
            clause = states_of_country_clause(country)
            if clause is None:
                return []
            stmt = stmt.where(clause)

        result = await self._session.execute(stmt)
        return list(result.scalars().all())


class LocationValidator:
    def __init__(self, locations: LocationService) -> None:
        self._locations = locations

    async def validate_country(self, country_id: str) -> Country:
        country = await self._locations.find_country(country_id)
        if country is None:
            raise NotFoundException(f"Country with ID {country_id} not found")
        return country

    async def validate_state(self, state_id: str, country_id: str) -> State:
        """Ensure the state exists and belongs to the country.

        The state is accepted when any matching strategy accepts it; see
        :mod:`greenpro.modules.location.matchers`.
        """
        state = await self._locations.find_state(state_id)
        if state is None:
            raise NotFoundException(f"State with ID {state_id} not found")

        country = await self.validate_country(country_id)

        matcher = find_matching_strategy(state, country)
        if matcher is None:
            raise BadRequestException(
                f"State with ID {state_id} does not belong to country with ID {country_id}"
            )

        logger.debug("State %s matched country %s via %s", state_id, country_id, matcher.name)
        return state
