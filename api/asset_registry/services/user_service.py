"""User service."""

import logging
from typing import List, Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from asset_registry.models.user import User
from asset_registry.services.activity_log import record_activity
from asset_registry.services.actor import Actor
from asset_registry.services.errors import DuplicateNameError, PermissionDeniedError, UserNotFoundError

logger = logging.getLogger(__name__)


def list_users(db: Session) -> List[User]:
    """All users ordered by name."""
    return db.query(User).order_by(User.name).all()


def get_user(db: Session, user_id: int) -> User:
    """
    Get user by ID.

    Raises:
        UserNotFoundError: If user not found
    """
    user = db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(f"User {user_id} not found")
    return user


def create_user_placeholder(db: Session, name: str, actor: Actor) -> User:
    """Record a person who can be assigned assets but has no account yet."""
    user = User(name=name.strip(), email=None, role=None, is_account=False)
    db.add(user)
    db.commit()
    db.refresh(user)
    record_activity(db, actor.name, f"Registered person {user.name}")
    return user


def upgrade_to_account(
    db: Session,
    user_id: int,
    email: str,
    role: str,
    actor: Actor,
    name: Optional[str] = None,
) -> User:
    """Turn a placeholder into a real account.

    Raises:
        PermissionDeniedError: If the caller is not an admin
        UserNotFoundError: If user not found
        DuplicateNameError: If the email is used by another account
    """
    if not actor.is_admin:
        raise PermissionDeniedError("Only admins can create accounts")

    user = get_user(db, user_id)
    user.email = email.strip().lower()
    user.role = role
    user.is_account = True
    if name:
        user.name = name.strip()

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise DuplicateNameError(f"Email '{email}' is already in use")
    db.refresh(user)

    logger.info(f"User {user.id} upgraded to {role} account by {actor.name}")
    record_activity(db, actor.name, f"Created {role} account for {user.name}")
    return user
