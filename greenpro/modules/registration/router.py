"""Product registration API router."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from greenpro.database.session import get_db, get_session_factory
from greenpro.exceptions import BadRequestException
from greenpro.modules.auth.auth import AuthenticatedUser, get_current_user
from greenpro.modules.registration.schemas import (
    BulkProductRegistrationCreate,
    ProductRegistrationCreate,
    ProductRegistrationResponse,
    ProductRegistrationUpdate,
)
from greenpro.modules.registration.service import ProductRegistrationService
from greenpro.modules.sequence.allocator import SequenceAllocator
from greenpro.rate_limit import limiter
from greenpro.schemas.responses import ApiResponse, ErrorResponse

router = APIRouter(
    prefix="/product-registration",
    tags=["product-registration"],
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)

REGISTERED_MESSAGE = "Product(s) registered successfully"


def get_sequence_allocator(
    session_factory: async_sessionmaker[AsyncSession] = Depends(get_session_factory),
) -> SequenceAllocator:
    return SequenceAllocator(session_factory)


def _comparable_id(value: str) -> str:
    # Ids are matched case-insensitively, as the service normalises them
    return value.strip().lower()


def _require_shared_owner(products: list[ProductRegistrationCreate]) -> None:
    """Every product in a batch must belong to the same manufacturer and vendor."""
    if not products:
        raise BadRequestException("At least one product is required")

    manufacturer_id = _comparable_id(products[0].manufacturer_id)
    vendor_id = _comparable_id(products[0].vendor_id)
    for product in products:
        if _comparable_id(product.manufacturer_id) != manufacturer_id:
            raise BadRequestException("All products must have the same manufacturer_id")
        if _comparable_id(product.vendor_id) != vendor_id:
            raise BadRequestException("All products must have the same vendor_id")


@router.post("/single", response_model=ApiResponse[ProductRegistrationResponse], status_code=201)
@limiter.limit("30/minute")
async def register_single_product(
    request: Request,
    body: ProductRegistrationCreate,
    db: AsyncSession = Depends(get_db),
    allocator: SequenceAllocator = Depends(get_sequence_allocator),
    user: AuthenticatedUser = Depends(get_current_user),
) -> ApiResponse[ProductRegistrationResponse]:
    """Register a product with its plants; URN and EOI are generated."""
    svc = ProductRegistrationService(db, allocator)
    product = await svc.register_product(body)
    return ApiResponse(
        message=REGISTERED_MESSAGE,
        data=ProductRegistrationResponse.model_validate(product),
    )


@router.post(
    "/bulk", response_model=ApiResponse[list[ProductRegistrationResponse]], status_code=201
)
@limiter.limit("10/minute")
async def register_bulk_products(
    request: Request,
    body: BulkProductRegistrationCreate,
    db: AsyncSession = Depends(get_db),
    allocator: SequenceAllocator = Depends(get_sequence_allocator),
    user: AuthenticatedUser = Depends(get_current_user),
) -> ApiResponse[list[ProductRegistrationResponse]]:
    """Register several products at once; each gets its own URN and a consecutive EOI."""
    _require_shared_owner(body.products)
    svc = ProductRegistrationService(db, allocator)
    products = await svc.register_bulk(body.products)
    return ApiResponse(
        message=REGISTERED_MESSAGE,
        data=[ProductRegistrationResponse.model_validate(p) for p in products],
    )


@router.get("/{product_id}", response_model=ApiResponse[ProductRegistrationResponse])
@limiter.limit("60/minute")
async def get_product(
    request: Request,
    product_id: str,
    db: AsyncSession = Depends(get_db),
    allocator: SequenceAllocator = Depends(get_sequence_allocator),
    user: AuthenticatedUser = Depends(get_current_user),
) -> ApiResponse[ProductRegistrationResponse]:
    svc = ProductRegistrationService(db, allocator)
    product = await svc.get_product(product_id)
    return ApiResponse(
        message="Success",
        data=ProductRegistrationResponse.model_validate(product),
    )


@router.put("/{product_id}", response_model=ApiResponse[ProductRegistrationResponse])
@limiter.limit("30/minute")
async def update_product(
    request: Request,
    product_id: str,
    body: ProductRegistrationUpdate,
    db: AsyncSession = Depends(get_db),
    allocator: SequenceAllocator = Depends(get_sequence_allocator),
    user: AuthenticatedUser = Depends(get_current_user),
) -> ApiResponse[ProductRegistrationResponse]:
    """Update a product. Renaming it generates a new URN and EOI."""
    svc = ProductRegistrationService(db, allocator)
    product = await svc.update_product(product_id, body)
    return ApiResponse(
        message="Product updated successfully",
        data=ProductRegistrationResponse.model_validate(product),
    )
