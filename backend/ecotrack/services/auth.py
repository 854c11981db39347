import logging
import uuid
from typing import List, Optional

import bcrypt
from sqlalchemy.orm import Session

from ecotrack.config import settings
from ecotrack.models import User
from ecotrack.schemas import UserCreate, UserUpdate

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Salted bcrypt hash, stored as text."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed hash or a password bcrypt refuses (over 72 bytes)
        return False


class UserService:
    def __init__(self, db: Session):
        self.db = db

    def find_user_by_credentials(self, email: str, password: str) -> Optional[User]:
        user = self.db.query(User).filter(User.email == email.strip().lower()).first()
        if user and verify_password(password, user.password_hash):
            return user
        logger.info(f"Failed login for {email}")
        return None

    def get_user(self, user_id: str) -> Optional[User]:
        return self.db.query(User).filter(User.id == user_id).first()

    def list_users(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at).all()

    def create_user(self, data: UserCreate, user_id: Optional[str] = None) -> User:
        existing = self.db.query(User).filter(User.email == data.email).first()
        if existing:
            raise ValueError("A user with this email already exists")

        user = User(
            id=user_id or str(uuid.uuid4()),
            name=data.name,
            email=data.email,
            password_hash=hash_password(data.password),
            role=data.role,
            allowed_units=list(data.allowed_units),
        )
        self.db.add(user)
        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Created user {user.email} ({user.role.value})")
        return user

    def update_user(self, user_id: str, data: UserUpdate) -> Optional[User]:
        user = self.get_user(user_id)
        if not user:
            return None

        update_data = data.model_dump(exclude_unset=True)
        password = update_data.pop("password", None)

        if "email" in update_data and update_data["email"] is not None:
            update_data["email"] = update_data["email"].strip().lower()
            clash = self.db.query(User).filter(User.email == update_data["email"], User.id != user_id).first()
            if clash:
                raise ValueError("A user with this email already exists")

        for field, value in update_data.items():
            if value is None:
                continue
            if field == "allowed_units":
                value = list(value)
            setattr(user, field, value)

        if password:
            user.password_hash = hash_password(password)

        self.db.commit()
        self.db.refresh(user)
        logger.info(f"Updated user {user.email}")
        return user

    def delete_user(self, user_id: str) -> bool:
        user = self.get_user(user_id)
        if not user:
            return False
        self.db.delete(user)
        self.db.commit()
        logger.info(f"Deleted user {user.email}")
        return True
