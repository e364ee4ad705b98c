"""Pydantic response schemas for country and state listings."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CountryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    country_name: str
    country_code: str | None = None
    legacy_id: int | None = None


class StateResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    state_name: str
    state_code: str | None = None
    country_ref: str | None = None
    legacy_country_id: int | None = None
    country_code: str | None = None
