"""Reference module: lookups for records owned by other services."""

from greenpro.modules.reference.service import ReferenceService

__all__ = ["ReferenceService"]
