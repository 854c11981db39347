from ecotrack.models.electricity import ElectricityRecord
from ecotrack.models.water import WaterRecord
from ecotrack.models.waste import WasteRecord, WasteCategory
from ecotrack.models.user import User, Role
from ecotrack.models.system_settings import SystemSettings

__all__ = [
    "ElectricityRecord",
    "WaterRecord",
    "WasteRecord",
    "WasteCategory",
    "User",
    "Role",
    "SystemSettings",
]
