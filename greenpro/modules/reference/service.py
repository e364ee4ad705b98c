"""Read-only lookups for manufacturer, vendor and category reference records."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from greenpro.exceptions import NotFoundException
from greenpro.models.category import Category
from greenpro.models.manufacturer import Manufacturer
from greenpro.models.vendor import Vendor


class ReferenceService:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_manufacturer(self, manufacturer_id: str) -> Manufacturer | None:
        return await self._session.get(Manufacturer, manufacturer_id)

    async def get_manufacturer(self, manufacturer_id: str) -> Manufacturer:
        manufacturer = await self.find_manufacturer(manufacturer_id)
        if manufacturer is None:
            raise NotFoundException("Manufacturer not found")
        return manufacturer

    async def get_vendor(self, vendor_id: str) -> Vendor:
        vendor = await self._session.get(Vendor, vendor_id)
        if vendor is None:
            raise NotFoundException(f"Vendor with ID {vendor_id} not found")
        return vendor

    async def get_category(self, category_id: str) -> Category:
        category = await self._session.get(Category, category_id)
        if category is None:
            raise NotFoundException(f"Category with ID {category_id} not found")
        return category
