from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from ecotrack.api.common import get_controller, get_insight_client, generate_insight, require_manager, require_user
from ecotrack.schemas import (
    WaterRecordCreate, WaterRecordResponse, WaterDashboard, InsightResponse, UserResponse,
)
from ecotrack.services.aggregation import filter_period
from ecotrack.services.insights import InsightClient
from ecotrack.services.record_store import RecordKind
from ecotrack.services.state import DashboardController

router = APIRouter()


@router.get("", response_model=List[WaterRecordResponse])
async def list_water(
    year: Optional[int] = Query(None),
    unit: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    """Water records the caller may see, optionally for one year and unit."""
    return filter_period(controller.visible.water, year, unit)


@router.post("", response_model=WaterRecordResponse)
async def create_water(
    record: WaterRecordCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    try:
        return controller.add_record(RecordKind.WATER, record)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/dashboard", response_model=WaterDashboard)
async def water_dashboard(
    year: Optional[int] = Query(None),
    unit: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    return controller.water_dashboard(unit=unit, year=year)


@router.post("/insights", response_model=InsightResponse)
async def water_insights(
    year: Optional[int] = Query(None),
    unit: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller),
    client: InsightClient = Depends(get_insight_client)
):
    dashboard = controller.water_dashboard(unit=unit, year=year)
    label = f"water consumption, {unit or 'all units'}, {dashboard.year}"
    return await generate_insight(client, dashboard.months, label)


@router.put("/{record_id}", response_model=WaterRecordResponse)
async def update_water(
    record_id: str,
    record: WaterRecordCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    """Replace every field of a water record."""
    updated = controller.update_record(RecordKind.WATER, record_id, record)
    if not updated:
        raise HTTPException(status_code=404, detail="Water record not found")
    return updated


@router.delete("/{record_id}")
async def delete_water(
    record_id: str,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    if not controller.delete_record(RecordKind.WATER, record_id):
        raise HTTPException(status_code=404, detail="Water record not found")
    return {"message": "Water record deleted"}
