from sqlalchemy import Column, String, Float, Date, DateTime
from datetime import datetime
from ecotrack.database import Base


class WaterRecord(Base):
    __tablename__ = "water_records"

    id = Column(String(36), primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    unit = Column(String(255), nullable=False, index=True)
    volume_m3 = Column(Float, nullable=False, default=0.0)
    cost = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<WaterRecord(id={self.id}, unit='{self.unit}', date={self.date})>"
