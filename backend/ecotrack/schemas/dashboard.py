from pydantic import BaseModel
from typing import Dict, List, Optional
import enum


class GoalKind(str, enum.Enum):
    SHARE = "share"  # actual must reach the goal (renewable %, recycling %)
    LIMIT = "limit"  # actual must stay at or below the goal (water volume)


class MonthSummary(BaseModel):
    month: str  # YYYY-MM
    totals: Dict[str, float] = {}
    renewable_share: Optional[float] = None  # %, electricity only
    breakdown: Dict[str, float] = {}  # weight per waste type, waste only


class GoalEvaluation(BaseModel):
    kind: GoalKind
    target: float
    actual: float
    met: bool
    margin_percent: float
    progress: float  # 0-100, for progress bars


class UnitTotal(BaseModel):
    unit: str
    total: float


class TypeTotal(BaseModel):
    type: str
    weight_kg: float


class ElectricityDashboard(BaseModel):
    year: int
    unit: Optional[str] = None
    available_years: List[int]
    months: List[MonthSummary]
    total_kwh: float
    total_cost: float
    total_savings: float
    renewable_percentage: float
    goal: GoalEvaluation
    trend_percent: float
    ranking: List[UnitTotal]


class WaterDashboard(BaseModel):
    year: int
    unit: Optional[str] = None
    available_years: List[int]
    months: List[MonthSummary]
    total_volume_m3: float
    total_cost: float
    average_monthly_volume_m3: float
    goal: GoalEvaluation
    trend_percent: float
    ranking: List[UnitTotal]


class WasteDashboard(BaseModel):
    year: int
    type: Optional[str] = None
    available_years: List[int]
    months: List[MonthSummary]
    total_weight_kg: float
    recyclable_kg: float
    non_recyclable_kg: float
    financial_value: float
    recycling_rate: float
    type_breakdown: List[TypeTotal]
    goal: GoalEvaluation
    trend_percent: float


class InsightResponse(BaseModel):
    label: str
    text: str


class ImportResult(BaseModel):
    message: str
    created: int
    errors: List[str] = []
