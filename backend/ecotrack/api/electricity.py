from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from ecotrack.api.common import get_controller, get_insight_client, generate_insight, require_manager, require_user
from ecotrack.schemas import (
    ElectricityRecordCreate, ElectricityRecordResponse, ElectricityDashboard, InsightResponse, UserResponse,
)
from ecotrack.services.aggregation import filter_period
from ecotrack.services.insights import InsightClient
from ecotrack.services.record_store import RecordKind
from ecotrack.services.state import DashboardController

router = APIRouter()


@router.get("", response_model=List[ElectricityRecordResponse])
async def list_electricity(
    year: Optional[int] = Query(None),
    unit: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    """Electricity records the caller may see, optionally for one year and unit."""
    return filter_period(controller.visible.electricity, year, unit)


@router.post("", response_model=ElectricityRecordResponse)
async def create_electricity(
    record: ElectricityRecordCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    try:
        return controller.add_record(RecordKind.ELECTRICITY, record)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/dashboard", response_model=ElectricityDashboard)
async def electricity_dashboard(
    year: Optional[int] = Query(None),
    unit: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    return controller.electricity_dashboard(unit=unit, year=year)


@router.post("/insights", response_model=InsightResponse)
async def electricity_insights(
    year: Optional[int] = Query(None),
    unit: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller),
    client: InsightClient = Depends(get_insight_client)
):
    dashboard = controller.electricity_dashboard(unit=unit, year=year)
    label = f"electricity consumption, {unit or 'all units'}, {dashboard.year}"
    return await generate_insight(client, dashboard.months, label)


@router.put("/{record_id}", response_model=ElectricityRecordResponse)
async def update_electricity(
    record_id: str,
    record: ElectricityRecordCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    """Replace every field of an electricity record."""
    updated = controller.update_record(RecordKind.ELECTRICITY, record_id, record)
    if not updated:
        raise HTTPException(status_code=404, detail="Electricity record not found")
    return updated


@router.delete("/{record_id}")
async def delete_electricity(
    record_id: str,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    if not controller.delete_record(RecordKind.ELECTRICITY, record_id):
        raise HTTPException(status_code=404, detail="Electricity record not found")
    return {"message": "Electricity record deleted"}
