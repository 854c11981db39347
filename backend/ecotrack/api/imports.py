"""
Bulk import of already-shaped records (e.g. rows parsed from a spreadsheet on
the client). Every row goes through the same add path as a manual entry.
"""
from fastapi import APIRouter, Body, Depends
from typing import Any, Dict, List

from ecotrack.api.common import get_controller, require_manager
from ecotrack.schemas import ImportResult, UserResponse
from ecotrack.services.bulk_import import import_records
from ecotrack.services.record_store import RecordKind
from ecotrack.services.state import DashboardController

router = APIRouter()


@router.post("/{kind}", response_model=ImportResult)
async def import_kind(
    kind: RecordKind,
    rows: List[Dict[str, Any]] = Body(...),
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    return import_records(controller, kind, rows)
