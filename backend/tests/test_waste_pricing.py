import pytest
from datetime import date
from pydantic import ValidationError

from ecotrack.schemas import WasteRecordCreate, WasteRecordResponse
from ecotrack.services.waste_pricing import WastePricing, derive_price_per_kg, ANCHOR_PRICE, ANCHOR_FINANCIAL


def test_price_per_kg_is_zero_without_weight():
    assert derive_price_per_kg(0, 50) == 0
    assert derive_price_per_kg(-1, 50) == 0
    assert derive_price_per_kg(10, 50) == 5


def test_weight_edit_keeps_entered_financial_value():
    pricing = WastePricing.from_financial(10, 50).with_weight(20)

    assert pricing.financial_value == 50
    assert pricing.price_per_kg == 2.5
    assert pricing.anchor == ANCHOR_FINANCIAL


def test_weight_edit_keeps_entered_price():
    pricing = WastePricing.from_price(10, 3).with_weight(20)

    assert pricing.price_per_kg == 3
    assert pricing.financial_value == 60


def test_last_entered_field_becomes_anchor():
    pricing = WastePricing.from_financial(10, 50).with_price(4)
    assert pricing.anchor == ANCHOR_PRICE
    assert pricing.financial_value == 40

    pricing = pricing.with_financial(100).with_weight(25)
    assert pricing.financial_value == 100
    assert pricing.price_per_kg == 4


def test_weight_edit_without_financial_value_uses_price():
    pricing = WastePricing.from_financial(0, 0).with_price(2).with_weight(5)
    assert pricing.financial_value == 10


def test_create_folds_price_into_financial_value():
    record = WasteRecordCreate(date=date(2024, 1, 1), type="Paper", weight_kg=10, price_per_kg=2)

    assert record.financial_value == 20
    assert record.price_per_kg is None


def test_create_prefers_explicit_financial_value():
    record = WasteRecordCreate(
        date=date(2024, 1, 1), type="Paper", weight_kg=10, price_per_kg=2, financial_value=35,
    )
    assert record.financial_value == 35


def test_create_rejects_blank_type():
    with pytest.raises(ValidationError):
        WasteRecordCreate(date=date(2024, 1, 1), type="  ", weight_kg=10)


def test_response_derives_price_per_kg():
    record = WasteRecordResponse(id="w1", date=date(2024, 1, 1), type="Paper", weight_kg=8, financial_value=20)
    assert record.price_per_kg == 2.5
    assert record.model_dump()["price_per_kg"] == 2.5

    empty = WasteRecordResponse(id="w2", date=date(2024, 1, 1), type="Paper", weight_kg=0, financial_value=20)
    assert empty.price_per_kg == 0


def test_price_entry_then_weight_then_financial():
    pricing = WastePricing.from_price(100, 0.5)
    assert pricing.financial_value == 50

    pricing = pricing.with_weight(200)
    assert pricing.financial_value == 100

    pricing = pricing.with_financial(300)
    assert pricing.weight_kg == 200
    assert pricing.price_per_kg == 1.5
