from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from ecotrack.api.common import require_manager
from ecotrack.database import get_db
from ecotrack.models import Role
from ecotrack.schemas import UserCreate, UserUpdate, UserResponse
from ecotrack.services.auth import UserService

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(
    manager: UserResponse = Depends(require_manager),
    db: Session = Depends(get_db)
):
    return UserService(db).list_users()


@router.post("", response_model=UserResponse)
async def create_user(
    user: UserCreate,
    manager: UserResponse = Depends(require_manager),
    db: Session = Depends(get_db)
):
    try:
        return UserService(db).create_user(user)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: str,
    user_update: UserUpdate,
    manager: UserResponse = Depends(require_manager),
    db: Session = Depends(get_db)
):
    """Update a user. A new password is re-hashed; omitted fields stay."""
    if user_id == manager.id and user_update.role not in (None, Role.MANAGER):
        raise HTTPException(status_code=400, detail="You cannot remove your own manager role")
    try:
        user = UserService(db).update_user(user_id, user_update)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if not user:
        raise HTTPException(status_code=404, detail="User not found")
    return user


@router.delete("/{user_id}")
async def delete_user(
    user_id: str,
    manager: UserResponse = Depends(require_manager),
    db: Session = Depends(get_db)
):
    if user_id == manager.id:
        raise HTTPException(status_code=400, detail="You cannot delete your own account")
    if not UserService(db).delete_user(user_id):
        raise HTTPException(status_code=404, detail="User not found")
    return {"message": "User deleted"}
