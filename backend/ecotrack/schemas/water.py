from pydantic import BaseModel, field_validator
from datetime import date
from typing import Optional


class WaterRecordBase(BaseModel):
    date: date
    unit: str
    volume_m3: float = 0.0
    cost: float = 0.0

    @field_validator('unit')
    @classmethod
    def unit_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('unit cannot be empty')
        return v


class WaterRecordCreate(WaterRecordBase):
    id: Optional[str] = None


class WaterRecordResponse(WaterRecordBase):
    id: str

    class Config:
        from_attributes = True
