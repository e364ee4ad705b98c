"""Identifier format checks applied before any storage access."""

from __future__ import annotations

from greenpro.exceptions import BadRequestException
from greenpro.modules.registration.constants import HEX_ID_REGEX


def is_hex_id(value: str) -> bool:
    return bool(HEX_ID_REGEX.match(value))


def ensure_hex_id(value: str | None, field_name: str) -> str:
    """Return the normalised id or raise :class:`BadRequestException`."""
    if value is None or not str(value).strip():
        raise BadRequestException(f"{field_name} is required")

    id_string = str(value).strip()
    if not is_hex_id(id_string):
        raise BadRequestException(
            f"Invalid {field_name} format. Must be a valid 24-character hex identifier.",
            details=[{"field": field_name, "message": "expected 24 hexadecimal characters"}],
        )
    return id_string.lower()
