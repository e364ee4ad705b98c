"""Pydantic request/response schemas for product registration."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------

_ID_FIELD = {"min_length": 1, "max_length": 64}


class PlantCreate(BaseModel):
    plant_name: str = Field(..., min_length=1, max_length=255)
    plant_location: str = Field(..., min_length=1, max_length=500)
    country_id: str = Field(..., **_ID_FIELD)
    state_id: str = Field(..., **_ID_FIELD)
    city: str = Field(..., min_length=1, max_length=255)


class ProductRegistrationCreate(BaseModel):
    manufacturer_id: str = Field(..., **_ID_FIELD)
    vendor_id: str = Field(..., **_ID_FIELD)
    category_id: str = Field(..., **_ID_FIELD)
    product_name: str = Field(..., min_length=1, max_length=500)
    product_image: str | None = Field(None, max_length=500)
    product_details: str | None = None
    product_type: int = 0
    plants: list[PlantCreate] = Field(..., min_length=1)


class BulkProductRegistrationCreate(BaseModel):
    # Emptiness is checked by the router so it surfaces as a 400
    products: list[ProductRegistrationCreate]


class ProductRegistrationUpdate(BaseModel):
    product_name: str | None = Field(None, min_length=1, max_length=500)
    product_image: str | None = Field(None, max_length=500)
    product_details: str | None = None
    product_type: int | None = None
    product_status: int | None = None
    product_renew_status: int | None = None
    urn_status: int | None = None


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------


class ProductPlantResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_plant_id: int
    product_id: str
    vendor_id: str
    category_id: str
    manufacturer_id: str
    urn_no: str
    eoi_no: str
    plant_name: str
    plant_location: str
    country_id: str
    state_id: str
    city: str
    plant_status: int
    created_at: datetime


class ProductRegistrationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    product_id: int
    category_id: str
    vendor_id: str
    manufacturer_id: str
    eoi_no: str
    urn_no: str
    product_name: str
    product_image: str | None
    product_details: str | None
    plant_count: int
    product_type: int
    product_status: int
    product_renew_status: int
    urn_status: int
    renewed_date: datetime | None = None
    certified_date: datetime | None = None
    validtill_date: datetime | None = None
    created_at: datetime
    updated_at: datetime
    plants: list[ProductPlantResponse] = []
