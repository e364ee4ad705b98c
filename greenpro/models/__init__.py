# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from greenpro.models.category import Category
from greenpro.models.location import Country, State
from greenpro.models.manufacturer import Manufacturer
from greenpro.models.product import Product
from greenpro.models.product_plant import ProductPlant
from greenpro.models.sequence_counter import SequenceCounter
from greenpro.models.vendor import Vendor

__all__ = [
    "Category",
    "Country",
    "Manufacturer",
    "Product",
    "ProductPlant",
    "SequenceCounter",
    "State",
    "Vendor",
]
