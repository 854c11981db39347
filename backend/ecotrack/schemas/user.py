from pydantic import BaseModel, field_validator
from datetime import datetime
from typing import List, Optional

from ecotrack.models.user import Role


def _normalize_email(v: str) -> str:
    v = v.strip().lower()
    if '@' not in v:
        raise ValueError('invalid email address')
    return v


def _check_password(v: str) -> str:
    if not v:
        raise ValueError('password cannot be empty')
    # bcrypt only hashes the first 72 bytes
    if len(v.encode('utf-8')) > 72:
        raise ValueError('password cannot be longer than 72 bytes')
    return v


def _check_name(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError('name cannot be empty')
    return v


class UserBase(BaseModel):
    name: str
    email: str
    role: Role = Role.VIEWER
    allowed_units: List[str] = []

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v)


class UserCreate(UserBase):
    password: str

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        return _check_name(v)

    @field_validator('password')
    @classmethod
    def password_not_blank(cls, v):
        return _check_password(v)


class UserUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[Role] = None
    allowed_units: Optional[List[str]] = None

    @field_validator('name')
    @classmethod
    def name_not_blank(cls, v):
        return _check_name(v) if v is not None else v

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v):
        return _normalize_email(v) if v is not None else v

    @field_validator('password')
    @classmethod
    def password_not_blank(cls, v):
        return _check_password(v) if v is not None else v


class UserResponse(UserBase):
    id: str
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class LoginRequest(BaseModel):
    email: str
    password: str
