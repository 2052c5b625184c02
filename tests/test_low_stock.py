from __future__ import annotations

import pytest

from brostok.config import settings
from brostok.errors import ValidationError
from brostok.services import inventory_service


def test_low_stock_returns_variants_strictly_below_threshold(db_session, catalog):
    low = inventory_service.compute_low_stock(db_session, 10)
    assert [v.sku for v in low] == ["POLO-M-HITAM", "JEANS-32-BIRU"]


def test_low_stock_boundary_is_exclusive(db_session, catalog):
    assert [v.stock for v in inventory_service.compute_low_stock(db_session, 5)] == [3]
    assert inventory_service.compute_low_stock(db_session, 0) == []


def test_threshold_defaults_to_settings(db_session, catalog):
    assert inventory_service.get_low_stock_threshold(db_session) == settings.LOW_STOCK_THRESHOLD
    assert len(inventory_service.compute_low_stock(db_session)) == 2


def test_changing_threshold_affects_only_future_queries(db_session, catalog):
    inventory_service.set_low_stock_threshold(db_session, 20)
    assert inventory_service.get_low_stock_threshold(db_session) == 20
    assert len(inventory_service.compute_low_stock(db_session)) == 3
    assert [v.stock for v in inventory_service.list_variants(db_session)] == [5, 15, 3]

    inventory_service.set_low_stock_threshold(db_session, 4)
    assert [v.sku for v in inventory_service.compute_low_stock(db_session)] == ["JEANS-32-BIRU"]


@pytest.mark.parametrize("value", [-1, 2.5, "10", None])
def test_invalid_threshold_rejected(db_session, value):
    with pytest.raises(ValidationError):
        inventory_service.set_low_stock_threshold(db_session, value)


def test_dashboard_summary(db_session, catalog):
    summary = inventory_service.dashboard_summary(db_session)

    assert summary["total_products"] == 2
    assert summary["total_variants"] == 3
    assert summary["low_stock_threshold"] == 10
    assert summary["low_stock_count"] == 2
    first = summary["low_stock_items"][0]
    assert first["product_name"] == "Kaos Polo"
    assert first["label"] == "M - Hitam"
    assert first["stock"] == 5
