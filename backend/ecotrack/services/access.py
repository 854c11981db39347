"""
Role-based visibility. This is the only place that looks at a user's role:
everything else asks `visible_data` what to show and `can_manage` whether a
change is allowed.
"""
import logging
from typing import Any, List, NamedTuple, Optional, Set

from ecotrack.models.user import Role

logger = logging.getLogger(__name__)


class VisibleData(NamedTuple):
    units: List[str]
    electricity: List[Any]
    water: List[Any]
    waste: List[Any]


def empty_view() -> VisibleData:
    return VisibleData(units=[], electricity=[], water=[], waste=[])


def is_manager(user: Optional[Any]) -> bool:
    return user is not None and Role(user.role) == Role.MANAGER


def can_manage(user: Optional[Any]) -> bool:
    """Managers may change records, settings and users; viewers only read."""
    return is_manager(user)


def allowed_units(user: Optional[Any]) -> Set[str]:
    if user is None:
        return set()
    return set(getattr(user, "allowed_units", None) or [])


def visible_data(state: Any, user: Optional[Any]) -> VisibleData:
    """
    Narrow the full collections of `state` to what `user` may see.

    Managers see every unit. Viewers see only their allowed units for the
    unit-scoped kinds (electricity, water). Waste has no unit and is returned
    in full to any signed-in user.
    """
    if user is None:
        return empty_view()

    if is_manager(user):
        return VisibleData(
            units=list(state.units),
            electricity=list(state.electricity),
            water=list(state.water),
            waste=list(state.waste),
        )

    allowed = allowed_units(user)
    if not allowed:
        logger.debug(f"User {user.id} has no allowed units")

    return VisibleData(
        units=[u for u in state.units if u in allowed],
        electricity=[r for r in state.electricity if r.unit in allowed],
        water=[r for r in state.water if r.unit in allowed],
        # TODO: confirm with facilities whether waste should be unit-scoped like electricity/water
        waste=list(state.waste),
    )
