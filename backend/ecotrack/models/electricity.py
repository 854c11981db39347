from sqlalchemy import Column, String, Float, Date, DateTime
from datetime import datetime
from ecotrack.database import Base


class ElectricityRecord(Base):
    __tablename__ = "electricity_records"

    id = Column(String(36), primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    unit = Column(String(255), nullable=False, index=True)
    conventional_kwh = Column(Float, nullable=False, default=0.0)
    conventional_cost = Column(Float, nullable=False, default=0.0)
    renewable_kwh = Column(Float, nullable=False, default=0.0)
    renewable_cost = Column(Float, nullable=False, default=0.0)
    renewable_savings = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<ElectricityRecord(id={self.id}, unit='{self.unit}', date={self.date})>"
