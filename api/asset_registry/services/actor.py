"""Caller identity passed explicitly into services."""

from dataclasses import dataclass

ADMIN_ROLE = "admin"
USER_ROLE = "user"


@dataclass(frozen=True)
class Actor:
    """Who is performing an operation."""

    name: str = "anonymous"
    role: str = USER_ROLE

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


SYSTEM_ACTOR = Actor(name="system", role=ADMIN_ROLE)
