"""
First-start defaults: the unit list, the three goals and an initial manager.
Existing data is never overwritten.
"""
import logging

from sqlalchemy.orm import Session

from ecotrack.config import settings
from ecotrack.models import SystemSettings, User, Role
from ecotrack.schemas import UserCreate
from ecotrack.services.auth import UserService

logger = logging.getLogger(__name__)


def seed_defaults(db: Session) -> None:
    if not db.query(SystemSettings).first():
        db.add(SystemSettings(
            units=list(settings.default_units),
            electricity_goal=settings.default_electricity_goal,
            water_goal=settings.default_water_goal,
            waste_goal=settings.default_waste_goal,
        ))
        db.commit()
        logger.info(f"Seeded default settings with {len(settings.default_units)} units")

    if db.query(User).filter(User.role == Role.MANAGER).first():
        return

    existing = db.query(User).filter(User.email == settings.admin_email.strip().lower()).first()
    if existing:
        # No manager left: give the configured admin account its role back
        existing.role = Role.MANAGER
        db.commit()
        logger.warning(f"No manager found; promoted existing user {existing.email} to manager")
    else:
        UserService(db).create_user(UserCreate(
            name=settings.admin_name,
            email=settings.admin_email,
            password=settings.admin_password,
            role=Role.MANAGER,
        ))
        logger.warning(f"Created initial manager {settings.admin_email}; change its password")
