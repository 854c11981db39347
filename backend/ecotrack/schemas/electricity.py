from pydantic import BaseModel, field_validator
from datetime import date
from typing import Optional


class ElectricityRecordBase(BaseModel):
    date: date
    unit: str
    conventional_kwh: float = 0.0
    conventional_cost: float = 0.0
    renewable_kwh: float = 0.0
    renewable_cost: float = 0.0
    renewable_savings: float = 0.0

    @field_validator('unit')
    @classmethod
    def unit_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('unit cannot be empty')
        return v


class ElectricityRecordCreate(ElectricityRecordBase):
    id: Optional[str] = None  # bulk import may carry its own id


class ElectricityRecordResponse(ElectricityRecordBase):
    id: str

    @property
    def total_kwh(self) -> float:
        return self.conventional_kwh + self.renewable_kwh

    @property
    def total_cost(self) -> float:
        return self.conventional_cost + self.renewable_cost

    class Config:
        from_attributes = True
