from ecotrack.schemas.electricity import ElectricityRecordCreate, ElectricityRecordResponse
from ecotrack.schemas.water import WaterRecordCreate, WaterRecordResponse
from ecotrack.schemas.waste import WasteRecordCreate, WasteRecordResponse
from ecotrack.schemas.user import UserCreate, UserUpdate, UserResponse, LoginRequest
from ecotrack.schemas.system_settings import SettingsResponse, SettingsUpdate, UnitCreate
from ecotrack.schemas.dashboard import (
    GoalKind, MonthSummary, GoalEvaluation, UnitTotal, TypeTotal,
    ElectricityDashboard, WaterDashboard, WasteDashboard, InsightResponse, ImportResult,
)

__all__ = [
    "ElectricityRecordCreate", "ElectricityRecordResponse",
    "WaterRecordCreate", "WaterRecordResponse",
    "WasteRecordCreate", "WasteRecordResponse",
    "UserCreate", "UserUpdate", "UserResponse", "LoginRequest",
    "SettingsResponse", "SettingsUpdate", "UnitCreate",
    "GoalKind", "MonthSummary", "GoalEvaluation", "UnitTotal", "TypeTotal",
    "ElectricityDashboard", "WaterDashboard", "WasteDashboard", "InsightResponse", "ImportResult",
]
