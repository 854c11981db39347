from pydantic import BaseModel, computed_field, field_validator, model_validator
from datetime import date
from typing import Optional

from ecotrack.models.waste import WasteCategory
from ecotrack.services.waste_pricing import WastePricing, derive_price_per_kg


class WasteRecordBase(BaseModel):
    date: date
    type: str
    category: WasteCategory = WasteCategory.RECYCLABLE
    weight_kg: float = 0.0

    @field_validator('type')
    @classmethod
    def type_not_blank(cls, v):
        v = v.strip()
        if not v:
            raise ValueError('type cannot be empty')
        return v


class WasteRecordCreate(WasteRecordBase):
    id: Optional[str] = None
    financial_value: Optional[float] = None
    price_per_kg: Optional[float] = None  # input only, folded into financial_value

    @model_validator(mode='after')
    def reconcile_financial_value(self):
        # price_per_kg is never stored; it only fills in a missing financial value
        if self.financial_value is None:
            self.financial_value = WastePricing.from_price(self.weight_kg, self.price_per_kg or 0.0).financial_value
        self.price_per_kg = None
        return self


class WasteRecordResponse(WasteRecordBase):
    id: str
    financial_value: float = 0.0

    @computed_field
    @property
    def price_per_kg(self) -> float:
        return derive_price_per_kg(self.weight_kg, self.financial_value)

    class Config:
        from_attributes = True
