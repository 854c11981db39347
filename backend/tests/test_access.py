from datetime import date

from ecotrack.models import Role
from ecotrack.schemas import ElectricityRecordResponse, WaterRecordResponse, WasteRecordResponse, UserResponse
from ecotrack.services.access import VisibleData, can_manage, visible_data
from ecotrack.services.state import AppState


def _user(role, units=()):
    return UserResponse(id=f"{role.value}-1", name="Someone", email="someone@example.com", role=role, allowed_units=list(units))


def _state():
    day = date(2024, 1, 1)
    return AppState(
        units=["W6", "W7", "W20"],
        electricity=[
            ElectricityRecordResponse(id="e1", date=day, unit="W6", conventional_kwh=10),
            ElectricityRecordResponse(id="e2", date=day, unit="W7", conventional_kwh=20),
        ],
        water=[
            WaterRecordResponse(id="h1", date=day, unit="W7", volume_m3=3),
            WaterRecordResponse(id="h2", date=day, unit="W20", volume_m3=4),
        ],
        waste=[WasteRecordResponse(id="x1", date=day, type="Paper", weight_kg=5)],
    )


def test_no_user_sees_nothing():
    assert visible_data(_state(), None) == VisibleData(units=[], electricity=[], water=[], waste=[])


def test_signed_out_views_do_not_share_lists():
    first = visible_data(_state(), None)
    first.electricity.append("leaked")

    assert visible_data(_state(), None).electricity == []


def test_manager_sees_everything():
    visible = visible_data(_state(), _user(Role.MANAGER))

    assert visible.units == ["W6", "W7", "W20"]
    assert len(visible.electricity) == 2
    assert len(visible.water) == 2
    assert len(visible.waste) == 1


def test_viewer_sees_only_allowed_units():
    visible = visible_data(_state(), _user(Role.VIEWER, ["W7"]))

    assert visible.units == ["W7"]
    assert [r.id for r in visible.electricity] == ["e2"]
    assert [r.id for r in visible.water] == ["h1"]
    # waste has no unit
    assert [r.id for r in visible.waste] == ["x1"]


def test_viewer_without_units_sees_no_unit_data():
    visible = visible_data(_state(), _user(Role.VIEWER))

    assert visible.units == []
    assert visible.electricity == []
    assert visible.water == []


def test_only_managers_can_manage():
    assert can_manage(_user(Role.MANAGER))
    assert not can_manage(_user(Role.VIEWER, ["W6"]))
    assert not can_manage(None)


def test_viewer_sees_all_waste_but_only_own_units():
    day = date(2024, 1, 1)
    state = AppState(
        units=["Warehouse 6", "Warehouse 7", "Warehouse 20", "Warehouse 21"],
        electricity=[
            ElectricityRecordResponse(id=f"e{i}", date=day, unit=unit)
            for i, unit in enumerate(["Warehouse 6", "Warehouse 20", "Warehouse 21"])
        ],
        water=[WaterRecordResponse(id="h1", date=day, unit="Warehouse 7")],
        waste=[
            WasteRecordResponse(id="x1", date=day, type="Paper", weight_kg=1),
            WasteRecordResponse(id="x2", date=day, type="Glass", weight_kg=2),
        ],
    )
    visible = visible_data(state, _user(Role.VIEWER, ["Warehouse 20", "Warehouse 21"]))

    assert {r.unit for r in visible.electricity} == {"Warehouse 20", "Warehouse 21"}
    assert visible.water == []
    assert len(visible.waste) == 2
