"""Country and state listing endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from greenpro.rate_limit import limiter
from greenpro.database.session import get_db
from greenpro.modules.location.schemas import CountryResponse, StateResponse
from greenpro.modules.location.service import LocationService
from greenpro.modules.registration.validators import ensure_hex_id

router = APIRouter(tags=["locations"])


@router.get("/countries", response_model=list[CountryResponse])
@limiter.limit("60/minute")
async def list_countries(
    request: Request,
    db: AsyncSession = Depends(get_db),
) -> list[CountryResponse]:
    svc = LocationService(db)
    countries = await svc.list_countries()
    return [CountryResponse.model_validate(c) for c in countries]


@router.get("/states", response_model=list[StateResponse])
@limiter.limit("60/minute")
async def list_states(
    request: Request,
    country_id: str | None = Query(None, description="Only states belonging to this country"),
    db: AsyncSession = Depends(get_db),
) -> list[StateResponse]:
    if country_id is not None:
        ensure_hex_id(country_id, "countryId")
    svc = LocationService(db)
    states = await svc.list_states(country_id)
    return [StateResponse.model_validate(s) for s in states]
