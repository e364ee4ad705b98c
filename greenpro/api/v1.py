"""Centralized v1 API router: all module routers are included here."""

from fastapi import APIRouter

from greenpro.modules.location.router import router as location_router
from greenpro.modules.registration.router import router as registration_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(registration_router)
v1_router.include_router(location_router)
