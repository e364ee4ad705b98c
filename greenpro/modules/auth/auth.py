"""JWT authentication dependency for FastAPI.

Tokens are issued by the vendor portal's login flow; this service only
verifies them and extracts the vendor user's claims.
"""

import logging
from dataclasses import dataclass

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from greenpro.config import settings
from greenpro.exceptions import UnauthorizedException

logger = logging.getLogger(__name__)

# FastAPI security scheme, extracts Bearer token from Authorization header
_bearer_scheme = HTTPBearer(auto_error=False)


@dataclass
class AuthenticatedUser:
    """Represents the vendor user extracted from a JWT token."""

    id: str
    vendor_id: str
    role: str


def _decode_token(token: str) -> dict:
    """Decode and validate a JWT token. Raises UnauthorizedException on failure."""
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
        return payload
    except JWTError as exc:
        logger.warning("JWT validation failed: %s", exc)
        raise UnauthorizedException("Invalid or expired token") from exc


async def get_current_user(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
) -> AuthenticatedUser:
    """FastAPI dependency that extracts and validates the current user from JWT."""
    if credentials is None:
        raise UnauthorizedException("Authentication required")

    payload = _decode_token(credentials.credentials)

    try:
        user = AuthenticatedUser(
            id=str(payload["userId"]),
            vendor_id=str(payload["vendorId"]),
            role=str(payload.get("role", "vendor")),
        )
    except KeyError as exc:
        raise UnauthorizedException("Token is missing required claims") from exc

    request.state.user = user
    return user
