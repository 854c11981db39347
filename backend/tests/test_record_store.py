import pytest
from datetime import date

from ecotrack.schemas import ElectricityRecordCreate, WasteRecordCreate, WaterRecordCreate
from ecotrack.services.record_store import RecordKind, RecordStore


def test_create_assigns_id_and_lists_by_date(db):
    store = RecordStore(db)
    later = store.create(RecordKind.WATER, WaterRecordCreate(date=date(2024, 3, 1), unit="W6", volume_m3=5))
    earlier = store.create(RecordKind.WATER, {"date": "2024-01-01", "unit": "W7", "volume_m3": 2})

    assert later.id and earlier.id and later.id != earlier.id
    assert [r.id for r in store.list_all(RecordKind.WATER)] == [earlier.id, later.id]


def test_create_keeps_given_id_and_rejects_duplicates(db):
    store = RecordStore(db)
    data = ElectricityRecordCreate(id="fixed-1", date=date(2024, 1, 1), unit="W6", renewable_kwh=4)

    created = store.create(RecordKind.ELECTRICITY, data)
    assert created.id == "fixed-1"

    with pytest.raises(ValueError):
        store.create(RecordKind.ELECTRICITY, data)


def test_replace_and_remove(db):
    store = RecordStore(db)
    record = store.create(RecordKind.WATER, WaterRecordCreate(date=date(2024, 1, 1), unit="W6", volume_m3=5))

    updated = store.replace(RecordKind.WATER, record.id, WaterRecordCreate(date=date(2024, 1, 2), unit="W7", volume_m3=9))
    assert updated.id == record.id
    assert updated.unit == "W7"
    assert store.get(RecordKind.WATER, record.id).volume_m3 == 9

    assert store.remove(RecordKind.WATER, record.id)
    assert store.get(RecordKind.WATER, record.id) is None


def test_unknown_ids_are_ignored(db):
    store = RecordStore(db)
    data = WaterRecordCreate(date=date(2024, 1, 1), unit="W6", volume_m3=5)

    assert store.replace(RecordKind.WATER, "missing", data) is None
    assert store.remove(RecordKind.WATER, "missing") is False
    assert store.list_all(RecordKind.WATER) == []


def test_waste_price_is_stored_as_financial_value(db):
    store = RecordStore(db)
    record = store.create(
        RecordKind.WASTE,
        WasteRecordCreate(date=date(2024, 1, 1), type="Metal", weight_kg=4, price_per_kg=2.5),
    )

    assert record.financial_value == 10
    assert record.price_per_kg == 2.5


def test_settings_default_then_partial_save(db):
    store = RecordStore(db)
    defaults = store.get_settings()
    assert defaults.units == []
    assert defaults.water_goal == 0

    store.save_settings({"units": ["W6"], "water_goal": 40})
    saved = store.save_settings({"electricity_goal": 55})

    assert saved.units == ["W6"]
    assert saved.water_goal == 40
    assert saved.electricity_goal == 55
