from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import Optional

from ecotrack.api.common import get_current_user
from ecotrack.database import get_db
from ecotrack.schemas import LoginRequest, UserResponse
from ecotrack.services.auth import UserService

router = APIRouter()


@router.post("/login", response_model=UserResponse)
async def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    """Check email and password. The returned id goes into the X-User-Id header."""
    user = UserService(db).find_user_by_credentials(credentials.email, credentials.password)
    if not user:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    return user


@router.get("/me", response_model=Optional[UserResponse])
async def current_user(user: Optional[UserResponse] = Depends(get_current_user)):
    return user
