"""
Application state and the controller that owns it.

The controller loads every collection once from the store, keeps them in one
AppState, and routes each change through the store first and the pure
mutators second. Derived figures are recomputed from the state on every read.
"""
import logging
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel

from ecotrack.schemas import (
    ElectricityRecordResponse, WaterRecordResponse, WasteRecordResponse,
    UserResponse, SettingsResponse, SettingsUpdate,
    ElectricityDashboard, WaterDashboard, WasteDashboard,
)
from ecotrack.services import mutators
from ecotrack.services.access import VisibleData, visible_data
from ecotrack.services.dashboard_service import electricity_dashboard, water_dashboard, waste_dashboard
from ecotrack.services.record_store import RecordKind, RecordStore

logger = logging.getLogger(__name__)


class AppState(BaseModel):
    electricity: List[ElectricityRecordResponse] = []
    water: List[WaterRecordResponse] = []
    waste: List[WasteRecordResponse] = []
    units: List[str] = []
    electricity_goal: float = 0.0
    water_goal: float = 0.0
    waste_goal: float = 0.0
    current_user: Optional[UserResponse] = None


class DashboardController:
    def __init__(self, store: RecordStore, user: Optional[Any] = None):
        self.store = store
        self.state = self.load(user)

    def load(self, user: Optional[Any] = None) -> AppState:
        current = UserResponse.model_validate(user) if user is not None else None
        config = self.store.get_settings()
        return AppState(
            electricity=self.store.list_all(RecordKind.ELECTRICITY),
            water=self.store.list_all(RecordKind.WATER),
            waste=self.store.list_all(RecordKind.WASTE),
            units=config.units,
            electricity_goal=config.electricity_goal,
            water_goal=config.water_goal,
            waste_goal=config.waste_goal,
            current_user=current,
        )

    @property
    def visible(self) -> VisibleData:
        return visible_data(self.state, self.state.current_user)

    def _set(self, kind: RecordKind, collection: List[Any]) -> None:
        self.state = self.state.model_copy(update={kind.value: collection})

    # Records

    def add_record(self, kind: RecordKind, data: Union[BaseModel, Dict[str, Any]]) -> BaseModel:
        record = self.store.create(kind, data)
        self._set(kind, mutators.add(getattr(self.state, kind.value), record))
        return record

    def update_record(self, kind: RecordKind, record_id: str, data: Union[BaseModel, Dict[str, Any]]) -> Optional[BaseModel]:
        record = self.store.replace(kind, record_id, data)
        if record is None:
            return None
        self._set(kind, mutators.update(getattr(self.state, kind.value), record))
        return record

    def delete_record(self, kind: RecordKind, record_id: str) -> bool:
        removed = self.store.remove(kind, record_id)
        self._set(kind, mutators.delete(getattr(self.state, kind.value), record_id))
        return removed

    # Settings

    def settings(self) -> SettingsResponse:
        return SettingsResponse(
            units=self.state.units,
            electricity_goal=self.state.electricity_goal,
            water_goal=self.state.water_goal,
            waste_goal=self.state.waste_goal,
        )

    def update_settings(self, partial: Union[SettingsUpdate, Dict[str, Any]]) -> SettingsResponse:
        saved = self.store.save_settings(partial)
        self.state = self.state.model_copy(update=saved.model_dump())
        return saved

    def add_unit(self, name: str) -> SettingsResponse:
        name = name.strip()
        if not name or name in self.state.units:
            return self.settings()
        logger.info(f"Adding unit {name}")
        return self.update_settings(SettingsUpdate(units=[*self.state.units, name]))

    def remove_unit(self, name: str) -> SettingsResponse:
        """Drops the unit from the selection list. Its historical records stay."""
        if name not in self.state.units:
            return self.settings()
        logger.info(f"Removing unit {name}")
        return self.update_settings(SettingsUpdate(units=[u for u in self.state.units if u != name]))

    # Dashboards

    def electricity_dashboard(self, unit: Optional[str] = None, year: Optional[int] = None) -> ElectricityDashboard:
        return electricity_dashboard(self.visible, self.state.electricity_goal, unit, year)

    def water_dashboard(self, unit: Optional[str] = None, year: Optional[int] = None) -> WaterDashboard:
        return water_dashboard(self.visible, self.state.water_goal, unit, year)

    def waste_dashboard(self, waste_type: Optional[str] = None, year: Optional[int] = None) -> WasteDashboard:
        return waste_dashboard(self.visible, self.state.waste_goal, waste_type, year)
