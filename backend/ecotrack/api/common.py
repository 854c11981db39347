"""Dependencies shared by the routers."""
import logging
from typing import Optional, Sequence

from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from ecotrack.database import get_db
from ecotrack.schemas import UserResponse, InsightResponse, MonthSummary
from ecotrack.services.access import can_manage
from ecotrack.services.auth import UserService
from ecotrack.services.insights import InsightClient, InsightError, InsightNotConfigured
from ecotrack.services.record_store import RecordStore
from ecotrack.services.state import DashboardController

logger = logging.getLogger(__name__)


async def get_current_user(
    x_user_id: Optional[str] = Header(None),
    db: Session = Depends(get_db)
) -> Optional[UserResponse]:
    """The caller named by the X-User-Id header, or None when absent or unknown."""
    if not x_user_id:
        return None
    user = UserService(db).get_user(x_user_id)
    if not user:
        logger.info(f"Unknown user id {x_user_id} in request")
        return None
    return UserResponse.model_validate(user)


async def require_user(user: Optional[UserResponse] = Depends(get_current_user)) -> UserResponse:
    if user is None:
        raise HTTPException(status_code=401, detail="Not signed in")
    return user


async def require_manager(user: UserResponse = Depends(require_user)) -> UserResponse:
    if not can_manage(user):
        raise HTTPException(status_code=403, detail="Manager role required")
    return user


async def get_controller(
    user: Optional[UserResponse] = Depends(get_current_user),
    db: Session = Depends(get_db)
) -> DashboardController:
    return DashboardController(RecordStore(db), user)


def get_insight_client() -> InsightClient:
    return InsightClient()


async def generate_insight(client: InsightClient, months: Sequence[MonthSummary], label: str) -> InsightResponse:
    if not months:
        raise HTTPException(status_code=400, detail="No data for the selected period")
    try:
        text = await client.summarize_months(months, label)
    except InsightNotConfigured as e:
        raise HTTPException(status_code=503, detail=str(e))
    except InsightError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return InsightResponse(label=label, text=text)
