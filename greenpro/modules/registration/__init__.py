"""Product registration module: URN/EOI generation and transactional registration."""

from greenpro.modules.registration.identifiers import IdentifierGenerator
from greenpro.modules.registration.service import ProductRegistrationService

__all__ = [
    "IdentifierGenerator",
    "ProductRegistrationService",
]
