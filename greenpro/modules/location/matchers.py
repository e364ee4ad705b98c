"""Strategies for deciding whether a state belongs to a country.

Reference data comes in three shapes: modern rows link a state to its
country by id, legacy rows carry the old numeric country id, and some only
carry the country code. Matchers are evaluated in order and the first one
that accepts wins. Each matcher also knows how to express itself as a SQL
filter so that state listings agree with validation.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from sqlalchemy import ColumnElement, or_

from greenpro.models.location import Country, State


def country_code_of(country: Country) -> str | None:
    return country.legacy_country_code or country.country_code


@dataclass(frozen=True)
class StateCountryMatcher:
    name: str
    matches: Callable[[State, Country], bool]
    clause: Callable[[Country], ColumnElement[bool] | None]


def _reference_matches(state: State, country: Country) -> bool:
    return state.country_ref is not None and state.country_ref == country.id


def _reference_clause(country: Country) -> ColumnElement[bool] | None:
    return State.country_ref == country.id


def _legacy_id_matches(state: State, country: Country) -> bool:
    return (
        state.legacy_country_id is not None
        and country.legacy_id is not None
        and state.legacy_country_id == country.legacy_id
    )


def _legacy_id_clause(country: Country) -> ColumnElement[bool] | None:
    if country.legacy_id is None:
        return None
    return State.legacy_country_id == country.legacy_id


def _country_code_matches(state: State, country: Country) -> bool:
    code = country_code_of(country)
    return bool(state.country_code) and bool(code) and state.country_code == code


def _country_code_clause(country: Country) -> ColumnElement[bool] | None:
    code = country_code_of(country)
    if not code:
        return None
    return State.country_code == code


STATE_COUNTRY_MATCHERS: tuple[StateCountryMatcher, ...] = (
    StateCountryMatcher("reference_id", _reference_matches, _reference_clause),
    StateCountryMatcher("legacy_country_id", _legacy_id_matches, _legacy_id_clause),
    StateCountryMatcher("country_code", _country_code_matches, _country_code_clause),
)


def find_matching_strategy(
    state: State,
    country: Country,
    matchers: tuple[StateCountryMatcher, ...] = STATE_COUNTRY_MATCHERS,
) -> StateCountryMatcher | None:
    for matcher in matchers:
        if matcher.matches(state, country):
            return matcher
    return None


def states_of_country_clause(
    country: Country,
    matchers: tuple[StateCountryMatcher, ...] = STATE_COUNTRY_MATCHERS,
) -> ColumnElement[bool] | None:
    """OR together every applicable matcher, or ``None`` if none applies."""
    clauses = [c for c in (m.clause(country) for m in matchers) if c is not None]
    if not clauses:
        return None
    return or_(*clauses)
