from fastapi import APIRouter, Depends

from ecotrack.api.common import get_controller, require_manager, require_user
from ecotrack.schemas import SettingsResponse, SettingsUpdate, UnitCreate, UserResponse
from ecotrack.services.state import DashboardController

router = APIRouter()


@router.get("", response_model=SettingsResponse)
async def get_settings(
    user: UserResponse = Depends(require_user),
    controller: DashboardController = Depends(get_controller)
):
    """Units and goals. Viewers only get the units they may see."""
    current = controller.settings()
    return current.model_copy(update={"units": controller.visible.units})


@router.post("", response_model=SettingsResponse)
async def update_settings(
    settings_update: SettingsUpdate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    """Partial update: only the fields sent are changed."""
    return controller.update_settings(settings_update)


@router.post("/units", response_model=SettingsResponse)
async def add_unit(
    unit: UnitCreate,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    return controller.add_unit(unit.name)


@router.delete("/units/{name}", response_model=SettingsResponse)
async def remove_unit(
    name: str,
    manager: UserResponse = Depends(require_manager),
    controller: DashboardController = Depends(get_controller)
):
    """Remove a unit from the list. Records already logged against it are kept."""
    return controller.remove_unit(name)
