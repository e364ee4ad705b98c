"""Product registration service: transactional single, bulk and update workflows.

Every public operation runs in one transaction on the request session: either
the product, its plants and the EOI counter advance all land, or none do.
Product and plant ids come from :class:`SequenceAllocator` in their own
committed transactions and are not reclaimed on abort.
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import asynccontextmanager
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from greenpro.database.base import utcnow
from greenpro.exceptions import (
    AppException,
    BadRequestException,
    InternalServerException,
    NotFoundException,
)
from greenpro.models.product import Product
from greenpro.models.product_plant import ProductPlant
from greenpro.modules.location.service import LocationService, LocationValidator
from greenpro.modules.reference.service import ReferenceService
from greenpro.modules.registration.identifiers import IdentifierGenerator
from greenpro.modules.registration.schemas import (
    PlantCreate,
    ProductRegistrationCreate,
    ProductRegistrationUpdate,
)
from greenpro.modules.registration.validators import ensure_hex_id
from greenpro.modules.sequence.allocator import SequenceAllocator

logger = logging.getLogger(__name__)

_UPDATABLE_FIELDS = (
    "product_name",
    "product_image",
    "product_details",
    "product_type",
    "product_status",
    "product_renew_status",
    "urn_status",
)


class ProductRegistrationService:
    def __init__(
        self,
        session: AsyncSession,
        allocator: SequenceAllocator,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._session = session
        self._allocator = allocator
        self._references = ReferenceService(session)
        self._locations = LocationValidator(LocationService(session))
        self._identifiers = IdentifierGenerator(session, self._references, clock=clock)

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    async def register_product(self, data: ProductRegistrationCreate) -> Product:
        """Register one product with its plants."""
        data = self._normalise_ids(data)

        async with self._transaction("Product registration"):
            logger.info(
                "Registering product %r for manufacturer %s, vendor %s",
                data.product_name,
                data.manufacturer_id,
                data.vendor_id,
            )
            await self._resolve_owner(data)
            sequence = await self._identifiers.reserve_eoi_sequences(data.manufacturer_id)
            product = await self._register_one(data, sequence)

        logger.info(
            "Registered product %s (urn=%s, eoi=%s, plants=%d)",
            product.product_id,
            product.urn_no,
            product.eoi_no,
            product.plant_count,
        )
        return product

    async def register_bulk(self, items: list[ProductRegistrationCreate]) -> list[Product]:
        """Register a batch in one transaction.

        All items must share one manufacturer and vendor; the router enforces
        that before calling. EOI numbers for the batch are reserved in a
        single counter advance and handed out consecutively.
        """
        if not items:
            raise BadRequestException("At least one product is required")
        items = [self._normalise_ids(item) for item in items]
        first = items[0]

        async with self._transaction("Bulk product registration"):
            logger.info(
                "Registering %d products for manufacturer %s, vendor %s",
                len(items),
                first.manufacturer_id,
                first.vendor_id,
            )
            await self._resolve_owner(first)
            sequence = await self._identifiers.reserve_eoi_sequences(
                first.manufacturer_id, count=len(items)
            )
            products = []
            for offset, item in enumerate(items):
                if item.category_id != first.category_id:
                    await self._references.get_category(item.category_id)
                products.append(await self._register_one(item, sequence + offset))

        logger.info(
            "Registered %d products (eoi %s..%s)",
            len(products),
            products[0].eoi_no,
            products[-1].eoi_no,
        )
        return products

    # ------------------------------------------------------------------
    # Update / read
    # ------------------------------------------------------------------

    async def update_product(self, product_id: str, data: ProductRegistrationUpdate) -> Product:
        """Apply a partial update; a new product name regenerates URN and EOI."""
        product_id = ensure_hex_id(product_id, "productId")
        changes = {
            field: value
            for field, value in data.model_dump(exclude_unset=True).items()
            if field in _UPDATABLE_FIELDS and value is not None
        }

        async with self._transaction("Product update"):
            product = await self._get_product_or_404(product_id)

            new_name = changes.get("product_name")
            if new_name is not None and new_name != product.product_name:
                sequence = await self._identifiers.reserve_eoi_sequences(product.manufacturer_id)
                product.urn_no = self._identifiers.generate_urn()
                product.eoi_no = await self._identifiers.generate_eoi(
                    product.manufacturer_id, sequence
                )
                for plant in product.plants:
                    plant.urn_no = product.urn_no
                    plant.eoi_no = product.eoi_no
                logger.info(
                    "Product %s renamed, regenerated urn=%s eoi=%s",
                    product.product_id,
                    product.urn_no,
                    product.eoi_no,
                )

            for field, value in changes.items():
                setattr(product, field, value)
            product.updated_at = utcnow()
            await self._session.flush()

        return product

    async def get_product(self, product_id: str) -> Product:
        return await self._get_product_or_404(ensure_hex_id(product_id, "productId"))

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[None]:
        """Commit on success; roll back and classify the error otherwise.

        Bad-request and not-found errors pass through unchanged, as do other
        domain errors. Anything else becomes an :class:`InternalServerException`
        carrying the original message.
        """
        try:
            yield
            await self._session.commit()
        except (BadRequestException, NotFoundException) as exc:
            await self._session.rollback()
            logger.warning("%s rejected: %s", operation, exc.message)
            raise
        except AppException:
            await self._session.rollback()
            raise
        except Exception as exc:
            await self._session.rollback()
            logger.exception("%s failed", operation)
            message = str(exc) or f"{operation} failed"
            raise InternalServerException(f"{message}. Check server logs for details.") from exc

    @staticmethod
    def _normalise_ids(data: ProductRegistrationCreate) -> ProductRegistrationCreate:
        """Validate id formats up front, before any storage access."""
        plants = [
            plant.model_copy(
                update={
                    "country_id": ensure_hex_id(plant.country_id, "countryId"),
                    "state_id": ensure_hex_id(plant.state_id, "stateId"),
                }
            )
            for plant in data.plants
        ]
        return data.model_copy(
            update={
                "manufacturer_id": ensure_hex_id(data.manufacturer_id, "manufacturerId"),
                "vendor_id": ensure_hex_id(data.vendor_id, "vendorId"),
                "category_id": ensure_hex_id(data.category_id, "categoryId"),
                "plants": plants,
            }
        )

    async def _resolve_owner(self, data: ProductRegistrationCreate) -> None:
        await self._references.get_manufacturer(data.manufacturer_id)
        await self._references.get_vendor(data.vendor_id)
        await self._references.get_category(data.category_id)

    async def _register_one(self, data: ProductRegistrationCreate, sequence: int) -> Product:
        urn_no = self._identifiers.generate_urn()
        eoi_no = await self._identifiers.generate_eoi(data.manufacturer_id, sequence)
        product_id = await self._allocator.product_id()

        product = Product(
            product_id=product_id,
            category_id=data.category_id,
            vendor_id=data.vendor_id,
            manufacturer_id=data.manufacturer_id,
            eoi_no=eoi_no,
            urn_no=urn_no,
            product_name=data.product_name,
            product_image=data.product_image,
            product_details=data.product_details,
            plant_count=len(data.plants),
            product_type=data.product_type or 0,
            product_status=0,
            product_renew_status=0,
            urn_status=0,
            plants=[],
        )
        self._session.add(product)
        await self._session.flush()

        for plant_data in data.plants:
            product.plants.append(await self._register_plant(product, plant_data))
            await self._session.flush()

        return product

    async def _register_plant(self, product: Product, data: PlantCreate) -> ProductPlant:
        product_plant_id = await self._allocator.plant_id()
        await self._locations.validate_country(data.country_id)
        await self._locations.validate_state(data.state_id, data.country_id)

        return ProductPlant(
            product_plant_id=product_plant_id,
            product_id=product.id,
            vendor_id=product.vendor_id,
            category_id=product.category_id,
            manufacturer_id=product.manufacturer_id,
            country_id=data.country_id,
            state_id=data.state_id,
            urn_no=product.urn_no,
            eoi_no=product.eoi_no,
            plant_name=data.plant_name,
            plant_location=data.plant_location,
            city=data.city,
            plant_status=1,
        )

    async def _get_product_or_404(self, product_id: str) -> Product:
        stmt = (
            select(Product)
            .options(selectinload(Product.plants))
            .where(Product.id == product_id)
        )
        result = await self._session.execute(stmt)
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundException("Product not found")
        return product
