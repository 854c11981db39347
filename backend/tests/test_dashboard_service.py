import pytest
from datetime import date

from ecotrack.models import WasteCategory
from ecotrack.schemas import ElectricityRecordResponse, WaterRecordResponse, WasteRecordResponse
from ecotrack.services.access import VisibleData
from ecotrack.services.dashboard_service import electricity_dashboard, water_dashboard, waste_dashboard


UNITS = ["W6", "W7"]


def _visible(electricity=(), water=(), waste=()):
    return VisibleData(units=UNITS, electricity=list(electricity), water=list(water), waste=list(waste))


def test_electricity_dashboard():
    visible = _visible(electricity=[
        ElectricityRecordResponse(id="a", date=date(2024, 1, 5), unit="W6", conventional_kwh=60, renewable_kwh=40),
        ElectricityRecordResponse(id="b", date=date(2024, 1, 9), unit="W7", conventional_kwh=100),
        ElectricityRecordResponse(id="c", date=date(2024, 2, 5), unit="W6", conventional_kwh=50, renewable_kwh=50),
        ElectricityRecordResponse(id="d", date=date(2023, 6, 5), unit="W6", conventional_kwh=999),
    ])
    dashboard = electricity_dashboard(visible, 40.0, year=2024)

    assert [m.month for m in dashboard.months] == ["2024-01", "2024-02"]
    assert dashboard.total_kwh == 300
    # January 20%, February 50%
    assert dashboard.renewable_percentage == pytest.approx(35.0)
    assert not dashboard.goal.met
    assert dashboard.goal.margin_percent == pytest.approx(-5.0)
    assert dashboard.trend_percent == pytest.approx(-50.0)
    assert [(u.unit, u.total) for u in dashboard.ranking] == [("W6", 200), ("W7", 100)]
    assert 2023 in dashboard.available_years


def test_water_dashboard_scales_goal_with_units():
    visible = _visible(water=[
        WaterRecordResponse(id="a", date=date(2024, 1, 1), unit="W6", volume_m3=30),
        WaterRecordResponse(id="b", date=date(2024, 1, 1), unit="W7", volume_m3=20),
        WaterRecordResponse(id="c", date=date(2024, 2, 1), unit="W6", volume_m3=40),
    ])
    dashboard = water_dashboard(visible, 40.0, year=2024)

    assert dashboard.total_volume_m3 == 90
    assert dashboard.average_monthly_volume_m3 == 45
    assert dashboard.goal.target == 80
    assert dashboard.goal.met
    assert dashboard.goal.progress == pytest.approx(56.25)

    single = water_dashboard(visible, 40.0, unit="W6", year=2024)
    assert single.average_monthly_volume_m3 == 35
    assert single.goal.target == 40
    assert single.ranking == []


def test_water_dashboard_without_data():
    dashboard = water_dashboard(_visible(), 40.0, year=2024)

    assert dashboard.months == []
    assert dashboard.average_monthly_volume_m3 == 0
    assert dashboard.trend_percent == 0


def test_waste_dashboard():
    visible = _visible(waste=[
        WasteRecordResponse(id="a", date=date(2024, 1, 1), type="Paper", weight_kg=80, financial_value=40),
        WasteRecordResponse(
            id="b", date=date(2024, 1, 2), type="Mixed", weight_kg=20, category=WasteCategory.NON_RECYCLABLE,
        ),
    ])
    dashboard = waste_dashboard(visible, 90.0, year=2024)

    assert dashboard.total_weight_kg == 100
    assert dashboard.recyclable_kg == 80
    assert dashboard.non_recyclable_kg == 20
    assert dashboard.financial_value == 40
    assert dashboard.recycling_rate == pytest.approx(80.0)
    assert not dashboard.goal.met
    assert [t.type for t in dashboard.type_breakdown] == ["Paper", "Mixed"]

    paper = waste_dashboard(visible, 90.0, waste_type="Paper", year=2024)
    assert paper.total_weight_kg == 80
    assert paper.goal.met
