from datetime import date
from typing import Optional

from ecotrack.schemas.dashboard import ElectricityDashboard, WaterDashboard, WasteDashboard, GoalKind
from ecotrack.models.waste import WasteCategory
from ecotrack.services.access import VisibleData
from ecotrack.services.aggregation import (
    ELECTRICITY_EXTRACTORS,
    WASTE_EXTRACTORS,
    WATER_EXTRACTORS,
    available_years,
    average_renewable_percentage,
    electricity_monthly,
    filter_period,
    monthly_aggregate,
    month_over_month_change,
    rank_by_total,
    recycling_rate,
    total,
    type_breakdown,
    waste_monthly,
)
from ecotrack.services.goals import evaluate_goal, evaluate_water_goal


def electricity_dashboard(
    visible: VisibleData,
    goal: Optional[float],
    unit: Optional[str] = None,
    year: Optional[int] = None,
) -> ElectricityDashboard:
    """Renewable-share dashboard for one year, one unit or all visible units."""
    year = year or date.today().year
    records = filter_period(visible.electricity, year, unit)
    months = electricity_monthly(records)
    renewable = average_renewable_percentage(months)

    return ElectricityDashboard(
        year=year,
        unit=unit,
        available_years=available_years(visible.electricity),
        months=months,
        total_kwh=total(records, ELECTRICITY_EXTRACTORS["total_kwh"]),
        total_cost=total(records, ELECTRICITY_EXTRACTORS["cost"]),
        total_savings=total(records, "renewable_savings"),
        renewable_percentage=renewable,
        goal=evaluate_goal(renewable, goal, GoalKind.SHARE),
        trend_percent=month_over_month_change([m.totals["total_kwh"] for m in months]),
        ranking=rank_by_total(records, visible.units, ELECTRICITY_EXTRACTORS["total_kwh"], selected_unit=unit),
    )


def water_dashboard(
    visible: VisibleData,
    goal: Optional[float],
    unit: Optional[str] = None,
    year: Optional[int] = None,
) -> WaterDashboard:
    """
    Water volume dashboard. The goal is a monthly limit per unit, compared
    against the average monthly volume of the selection.
    """
    year = year or date.today().year
    records = filter_period(visible.water, year, unit)
    months = monthly_aggregate(records, WATER_EXTRACTORS)

    total_volume = total(records, "volume_m3")
    average_volume = total_volume / (len(months) or 1)

    return WaterDashboard(
        year=year,
        unit=unit,
        available_years=available_years(visible.water),
        months=months,
        total_volume_m3=total_volume,
        total_cost=total(records, "cost"),
        average_monthly_volume_m3=average_volume,
        goal=evaluate_water_goal(average_volume, goal, len(visible.units), unit),
        trend_percent=month_over_month_change([m.totals["volume_m3"] for m in months]),
        ranking=rank_by_total(records, visible.units, "volume_m3", selected_unit=unit),
    )


def waste_dashboard(
    visible: VisibleData,
    goal: Optional[float],
    waste_type: Optional[str] = None,
    year: Optional[int] = None,
) -> WasteDashboard:
    year = year or date.today().year
    records = filter_period(visible.waste, year)
    if waste_type is not None:
        records = [r for r in records if r.type == waste_type]

    months = waste_monthly(records)
    rate = recycling_rate(records)

    return WasteDashboard(
        year=year,
        type=waste_type,
        available_years=available_years(visible.waste),
        months=months,
        total_weight_kg=total(records, "weight_kg"),
        recyclable_kg=total(records, WASTE_EXTRACTORS["recyclable_kg"]),
        non_recyclable_kg=total(
            records, lambda r: r.weight_kg if r.category == WasteCategory.NON_RECYCLABLE else 0.0
        ),
        financial_value=total(records, "financial_value"),
        recycling_rate=rate,
        type_breakdown=type_breakdown(records),
        goal=evaluate_goal(rate, goal, GoalKind.SHARE),
        trend_percent=month_over_month_change([m.totals["weight_kg"] for m in months]),
    )
