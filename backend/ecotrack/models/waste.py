from sqlalchemy import Column, String, Float, Date, DateTime, Enum
from datetime import datetime
import enum
from ecotrack.database import Base


class WasteCategory(str, enum.Enum):
    RECYCLABLE = "Recyclable"
    NON_RECYCLABLE = "NonRecyclable"


class WasteRecord(Base):
    """
    A waste pickup. Not scoped to a unit.
    price_per_kg is derived from weight and financial value and is never stored.
    """
    __tablename__ = "waste_records"

    id = Column(String(36), primary_key=True, index=True)
    date = Column(Date, nullable=False, index=True)
    type = Column(String(255), nullable=False)  # e.g. "Cardboard", "Plastic"
    category = Column(Enum(WasteCategory), nullable=False, default=WasteCategory.RECYCLABLE)
    weight_kg = Column(Float, nullable=False, default=0.0)
    financial_value = Column(Float, nullable=False, default=0.0)  # negative = net cost
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f"<WasteRecord(id={self.id}, type='{self.type}', date={self.date})>"
