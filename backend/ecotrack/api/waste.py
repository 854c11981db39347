from fastapi import APIRouter, Depends, HTTPException, Query
from typing import List, Optional

from ecotrack.api.common import get_controller, get_insight_client, generate_insight, require_manager, require_user
from ecotrack.schemas import WasteRecordCreate, WasteRecordResponse, WasteDashboard, InsightResponse, UserResponse
from ecotrack.services.aggregation import filter_period
from ecotrack.services.insights import InsightClient
from ecotrack.services.record_store import RecordKind
from ecotrack.services.state import DashboardController

router = APIRouter()


@router.get("", response_model=List[WasteRecordResponse])
async def list_waste(
    year: Optional[int] = Query(None),
    type: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    records = filter_period(controller.visible.waste, year)
    if type:
        records = [r for r in records if r.type == type]
    return records


@router.post("", response_model=WasteRecordResponse)
async def create_waste(
    record: WasteRecordCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    """
    Create a waste record. Send either financial_value or price_per_kg; a
    price is turned into a financial value (weight x price) before saving.
    """
    try:
        return controller.add_record(RecordKind.WASTE, record)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/dashboard", response_model=WasteDashboard)
async def waste_dashboard(
    year: Optional[int] = Query(None),
    type: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    return controller.waste_dashboard(waste_type=type, year=year)


@router.post("/insights", response_model=InsightResponse)
async def waste_insights(
    year: Optional[int] = Query(None),
    type: Optional[str] = Query(None),
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller),
    client: InsightClient = Depends(get_insight_client)
):
    dashboard = controller.waste_dashboard(waste_type=type, year=year)
    label = f"waste generation, {type or 'all types'}, {dashboard.year}"
    return await generate_insight(client, dashboard.months, label)


@router.put("/{record_id}", response_model=WasteRecordResponse)
async def update_waste(
    record_id: str,
    record: WasteRecordCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    updated = controller.update_record(RecordKind.WASTE, record_id, record)
    if not updated:
        raise HTTPException(status_code=404, detail="Waste record not found")
    return updated


@router.delete("/{record_id}")
async def delete_waste(
    record_id: str,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    if not controller.delete_record(RecordKind.WASTE, record_id):
        raise HTTPException(status_code=404, detail="Waste record not found")
    return {"message": "Waste record deleted"}
