from sqlalchemy import Column, Integer, Float, DateTime, JSON
from datetime import datetime
from ecotrack.database import Base


class SystemSettings(Base):
    """Process-wide unit list and goals. A single row is expected."""
    __tablename__ = "system_settings"

    id = Column(Integer, primary_key=True, index=True)
    units = Column(JSON, nullable=False, default=list)
    electricity_goal = Column(Float, nullable=False, default=0.0)
    water_goal = Column(Float, nullable=False, default=0.0)
    waste_goal = Column(Float, nullable=False, default=0.0)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<SystemSettings(id={self.id}, units={self.units})>"
