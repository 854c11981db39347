from pydantic import BaseModel, field_validator
from typing import List, Optional


def normalize_units(units: List[str]) -> List[str]:
    """Trimmed names, blanks dropped, first occurrence kept."""
    seen = []
    for name in units:
        name = name.strip()
        if name and name not in seen:
            seen.append(name)
    return seen


class SettingsResponse(BaseModel):
    units: List[str] = []
    electricity_goal: float = 0.0
    water_goal: float = 0.0
    waste_goal: float = 0.0

    class Config:
        from_attributes = True


class SettingsUpdate(BaseModel):
    units: Optional[List[str]] = None
    electricity_goal: Optional[float] = None
    water_goal: Optional[float] = None
    waste_goal: Optional[float] = None

    @field_validator('units')
    @classmethod
    def clean_units(cls, v):
        return normalize_units(v) if v is not None else v


class UnitCreate(BaseModel):
    name: str
