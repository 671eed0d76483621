from datetime import datetime, timezone

from fieldops.models import ServiceCost
from fieldops.pricing.rates import PriceSheet, round2, to_number
from fieldops.repositories.service_costs import (
    get_service_cost_by_client_and_order_type,
    order_type_variants,
    upsert_service_cost,
)
from fieldops.services.order_costs import load_price_sheet

DEFAULTS = {"per_meter_rate": 19.98, "discount": 1.0}


def test_to_number_boundary():
    assert to_number("12.5") == 12.5
    assert to_number(3) == 3.0
    assert to_number(None) == 0.0
    assert to_number("abc") == 0.0
    assert to_number(True) == 0.0
    assert to_number(float("nan")) == 0.0
    assert to_number(None, 1.0) == 1.0
    assert to_number("", None) is None


def test_round2_is_half_up():
    assert round2(2.675) == 2.68
    assert round2(1.005) == 1.01
    assert round2(-1.005) == -1.01
    assert round2(10) == 10.0


def test_missing_row_is_all_zero():
    assert PriceSheet.from_row(None, DEFAULTS) == PriceSheet.zero()


def test_defaults_only_fill_empty_columns():
    sheet = PriceSheet.from_row(
        {"installation_cost": 1500, "per_meter_rate": None, "discount": None}, DEFAULTS
    )
    assert sheet.installation_cost == 1500.0
    assert sheet.per_meter_rate == 19.98
    assert sheet.discount == 1.0
    assert sheet.callout_cost == 0.0


def test_stored_values_win_over_defaults():
    sheet = PriceSheet.from_row({"per_meter_rate": "22.5", "discount": 0.9}, DEFAULTS)
    assert sheet.per_meter_rate == 22.5
    assert sheet.discount == 0.9


def test_garbage_column_falls_back_to_default():
    sheet = PriceSheet.from_row({"per_meter_rate": "n/a", "callout_cost": "n/a"}, DEFAULTS)
    assert sheet.per_meter_rate == 19.98
    assert sheet.callout_cost == 0.0


def test_order_type_variants():
    assert order_type_variants("drop_cable") == ["drop_cable", "drop-cable"]
    assert order_type_variants("Drop-Cable") == ["drop_cable", "drop-cable"]


def test_lookup_matches_both_spellings(db, openserve_client):
    db.add(ServiceCost(client_id=openserve_client.id, order_type="drop-cable", callout_cost=400))
    db.commit()

    row = get_service_cost_by_client_and_order_type(db, openserve_client.id, "drop_cable")
    assert row is not None
    assert row.callout_cost == 400


def test_newest_price_sheet_wins(db, openserve_client):
    db.add_all(
        [
            ServiceCost(
                client_id=openserve_client.id,
                order_type="drop_cable",
                callout_cost=300,
                updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
            ),
            ServiceCost(
                client_id=openserve_client.id,
                order_type="drop-cable",
                callout_cost=450,
                updated_at=datetime(2025, 6, 1, tzinfo=timezone.utc),
            ),
        ]
    )
    db.commit()

    row = get_service_cost_by_client_and_order_type(db, openserve_client.id, "drop_cable")
    assert row.callout_cost == 450


def test_upsert_updates_existing_row(db, drop_cable_sheet, openserve_client):
    row = upsert_service_cost(
        db,
        {"client_id": openserve_client.id, "order_type": "drop-cable", "callout_cost": 420.0},
    )
    assert row.id == drop_cable_sheet.id
    assert row.callout_cost == 420.0
    assert row.survey_planning_cost == 250.0
    assert db.query(ServiceCost).count() == 1


def test_upsert_creates_row_with_normalised_order_type(db, openserve_client):
    row = upsert_service_cost(
        db,
        {"client_id": openserve_client.id, "order_type": "Link-Build", "full_splice_cost": 3000},
    )
    assert row.order_type == "link_build"
    assert row.full_splice_cost == 3000


def test_load_price_sheet_applies_defaults(db, openserve_client):
    db.add(ServiceCost(client_id=openserve_client.id, order_type="drop_cable", installation_cost=900))
    db.commit()

    sheet = load_price_sheet(db, openserve_client.id, "drop_cable")
    assert sheet.installation_cost == 900.0
    assert sheet.per_meter_rate == 19.98
    assert sheet.discount == 1.0


def test_load_price_sheet_without_row_is_zero(db, openserve_client):
    assert load_price_sheet(db, openserve_client.id, "link_build") == PriceSheet.zero()
    assert load_price_sheet(db, None, "drop_cable") == PriceSheet.zero()


def test_upsert_only_writes_rate_columns(db, drop_cable_sheet, openserve_client):
    original_id = drop_cable_sheet.id
    row = upsert_service_cost(
        db,
        {
            "client_id": openserve_client.id,
            "order_type": "drop_cable",
            "id": "not-the-real-id",
            "created_at": None,
            "discount": 0.9,
        },
    )
    assert row.id == original_id
    assert row.created_at is not None
    assert row.discount == 0.9
