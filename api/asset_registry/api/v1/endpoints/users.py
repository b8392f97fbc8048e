"""User endpoints."""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from asset_registry.api.deps import get_actor, get_db
from asset_registry.schemas.user import UserAccountUpgrade, UserPlaceholderCreate, UserResponse
from asset_registry.services import user_service
from asset_registry.services.actor import Actor
from asset_registry.services.errors import DuplicateNameError, PermissionDeniedError, UserNotFoundError

router = APIRouter()


@router.get("/", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """List all people and accounts."""
    return user_service.list_users(db)


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    user_data: UserPlaceholderCreate,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """Record a person without an account so assets can be assigned to them."""
    return user_service.create_user_placeholder(db, user_data.name, actor)


@router.post("/{user_id}/account", response_model=UserResponse)
def upgrade_user(
    user_id: int,
    account_data: UserAccountUpgrade,
    db: Session = Depends(get_db),
    actor: Actor = Depends(get_actor),
):
    """
    Turn a recorded person into an account. Admin only.

    - **email**: Login email
    - **role**: admin or user (default: user)
    - **name**: Optional new display name
    """
    try:
        return user_service.upgrade_to_account(
            db,
            user_id,
            email=account_data.email,
            role=account_data.role,
            actor=actor,
            name=account_data.name,
        )
    except PermissionDeniedError as e:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(e))
    except UserNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except DuplicateNameError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
