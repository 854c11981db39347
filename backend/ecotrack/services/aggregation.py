"""
Monthly rollups, trends and per-unit rankings over visible records.

Everything here is a pure function of its arguments: results are recomputed
from the records on every call and the input sequences are never modified.
"""
from datetime import date
from operator import attrgetter
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from ecotrack.models.waste import WasteCategory
from ecotrack.schemas.dashboard import MonthSummary, UnitTotal, TypeTotal

Extractor = Union[str, Callable[[Any], float]]

ELECTRICITY_EXTRACTORS: Dict[str, Extractor] = {
    "conventional_kwh": "conventional_kwh",
    "renewable_kwh": "renewable_kwh",
    "total_kwh": lambda r: r.conventional_kwh + r.renewable_kwh,
    "cost": lambda r: r.conventional_cost + r.renewable_cost,
    "savings": "renewable_savings",
}

WATER_EXTRACTORS: Dict[str, Extractor] = {
    "volume_m3": "volume_m3",
    "cost": "cost",
}

WASTE_EXTRACTORS: Dict[str, Extractor] = {
    "weight_kg": "weight_kg",
    "recyclable_kg": lambda r: r.weight_kg if r.category == WasteCategory.RECYCLABLE else 0.0,
    "financial_value": "financial_value",
}


def _resolve(extractor: Extractor) -> Callable[[Any], float]:
    if callable(extractor):
        return extractor
    return attrgetter(extractor)


def month_key(value: Union[date, str]) -> str:
    """YYYY-MM bucket for a record date. The day is ignored."""
    if isinstance(value, str):
        value = date.fromisoformat(value[:10])
    return value.strftime("%Y-%m")


def filter_period(records: Iterable[Any], year: Optional[int] = None, unit: Optional[str] = None) -> List[Any]:
    """Records of one calendar year and, for unit-scoped kinds, one unit."""
    selected = []
    for record in records:
        if year is not None and month_key(record.date)[:4] != f"{year:04d}":
            continue
        if unit is not None and getattr(record, "unit", None) != unit:
            continue
        selected.append(record)
    return selected


def available_years(records: Iterable[Any], current_year: Optional[int] = None) -> List[int]:
    """Years present in the records plus the current year, newest first."""
    years = {int(month_key(r.date)[:4]) for r in records}
    years.add(current_year if current_year is not None else date.today().year)
    return sorted(years, reverse=True)


def total(records: Iterable[Any], extractor: Extractor) -> float:
    getter = _resolve(extractor)
    return sum(float(getter(r) or 0.0) for r in records)


def monthly_aggregate(records: Iterable[Any], extractors: Dict[str, Extractor]) -> List[MonthSummary]:
    """
    Group records by YYYY-MM and sum every extractor inside each month.
    Months come back in ascending order.
    """
    getters = {name: _resolve(extractor) for name, extractor in extractors.items()}
    buckets: Dict[str, Dict[str, float]] = {}

    for record in records:
        key = month_key(record.date)
        if key not in buckets:
            buckets[key] = {name: 0.0 for name in getters}
        for name, getter in getters.items():
            buckets[key][name] += float(getter(record) or 0.0)

    # Zero-padded keys sort chronologically
    return [MonthSummary(month=key, totals=buckets[key]) for key in sorted(buckets)]


def renewable_percentage(renewable_kwh: float, conventional_kwh: float) -> float:
    consumption = renewable_kwh + conventional_kwh
    if consumption == 0:
        return 0.0
    return renewable_kwh / consumption * 100


def electricity_monthly(records: Iterable[Any]) -> List[MonthSummary]:
    """Monthly electricity sums with the renewable share of each month."""
    months = monthly_aggregate(records, ELECTRICITY_EXTRACTORS)
    return [
        m.model_copy(update={
            "renewable_share": renewable_percentage(m.totals["renewable_kwh"], m.totals["conventional_kwh"])
        })
        for m in months
    ]


def average_renewable_percentage(months: Sequence[MonthSummary]) -> float:
    """
    Unweighted mean of the monthly renewable shares. Every month with
    consumption counts once regardless of its volume; months without any
    consumption are left out entirely.
    """
    shares = [
        m.renewable_share if m.renewable_share is not None
        else renewable_percentage(m.totals["renewable_kwh"], m.totals["conventional_kwh"])
        for m in months
        if m.totals.get("conventional_kwh", 0.0) + m.totals.get("renewable_kwh", 0.0) != 0
    ]
    if not shares:
        return 0.0
    return sum(shares) / len(shares)


def waste_monthly(records: Iterable[Any]) -> List[MonthSummary]:
    """Monthly waste totals plus the weight of every waste type seen that month."""
    records = list(records)
    breakdowns: Dict[str, Dict[str, float]] = {}
    for record in records:
        per_type = breakdowns.setdefault(month_key(record.date), {})
        per_type[record.type] = per_type.get(record.type, 0.0) + record.weight_kg

    return [
        m.model_copy(update={"breakdown": breakdowns[m.month]})
        for m in monthly_aggregate(records, WASTE_EXTRACTORS)
    ]


def recycling_rate(records: Iterable[Any]) -> float:
    """Recyclable share of total waste weight, in %."""
    records = list(records)
    total_weight = total(records, "weight_kg")
    if total_weight == 0:
        return 0.0
    return total(records, WASTE_EXTRACTORS["recyclable_kg"]) / total_weight * 100


def type_breakdown(records: Iterable[Any]) -> List[TypeTotal]:
    weights: Dict[str, float] = {}
    for record in records:
        weights[record.type] = weights.get(record.type, 0.0) + record.weight_kg
    return sorted(
        (TypeTotal(type=name, weight_kg=weight) for name, weight in weights.items()),
        key=lambda t: t.weight_kg,
        reverse=True,
    )


def month_over_month_change(values: Sequence[float]) -> float:
    """
    Percent change between the last two points of a chronological series.
    0 when there are fewer than two points or the previous point is 0.
    """
    if len(values) < 2:
        return 0.0
    previous, last = values[-2], values[-1]
    if previous == 0:
        return 0.0
    return (last - previous) / previous * 100


def rank_by_total(
    records: Iterable[Any],
    units: Sequence[str],
    extractor: Extractor,
    selected_unit: Optional[str] = None,
) -> List[UnitTotal]:
    """
    Per-unit totals, largest first. Every known unit is listed even without
    records; ties keep the order of `units`. Nothing is ranked when a single
    unit is selected.
    """
    if selected_unit is not None:
        return []

    getter = _resolve(extractor)
    totals = {unit: 0.0 for unit in units}
    for record in records:
        if record.unit in totals:
            totals[record.unit] += float(getter(record) or 0.0)

    # sorted() is stable, so equal totals stay in unit-list order
    return sorted(
        (UnitTotal(unit=unit, total=value) for unit, value in totals.items()),
        key=lambda u: u.total,
        reverse=True,
    )
