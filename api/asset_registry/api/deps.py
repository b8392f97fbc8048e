"""API dependencies."""

from fastapi import Header

from asset_registry.database import get_db
from asset_registry.services.actor import USER_ROLE, Actor

__all__ = ["get_db", "get_actor"]


def get_actor(
    x_user_name: str = Header(None),
    x_user_role: str = Header(None),
) -> Actor:
    """Build the caller identity from request headers.

    Missing headers mean an anonymous caller with the plain user role.

    The headers are trusted as-is: this service does no authentication of
    its own and must sit behind a gateway that authenticates the caller and
    sets X-User-Name and X-User-Role, stripping any client-supplied values.
    """
    name = (x_user_name or "").strip() or "anonymous"
    role = (x_user_role or "").strip().lower() or USER_ROLE
    return Actor(name=name, role=role)
