"""Auth module: bearer token verification for vendor users."""

from greenpro.modules.auth.auth import AuthenticatedUser, get_current_user

__all__ = ["AuthenticatedUser", "get_current_user"]
