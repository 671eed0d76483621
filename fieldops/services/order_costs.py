# fieldops/services/order_costs.py
"""
Glue between the persistence layer and the pure cost engine.

Per request: fetch the order(s), fetch the client's price sheet once, run the
calculator, return plain dicts. Nothing is cached between requests.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, Optional

from sqlalchemy.orm import Session

from fieldops.core.logging_config import logger
from fieldops.core.settings import settings
from fieldops.observability.metrics import cost_calculation_counter, weekly_orders_hist
from fieldops.pricing.drop_cable import calculate_drop_cable_cost
from fieldops.pricing.link_build import calculate_link_build_cost
from fieldops.pricing.models import CostResult, DropCableOrder, LinkBuildOrder
from fieldops.pricing.rates import PriceSheet, round2
from fieldops.pricing.weeks import canonicalize_week
from fieldops.repositories.orders import (
    DROP_CABLE,
    LINK_BUILD,
    get_order_by_id,
    list_orders_for_client_and_week,
)
from fieldops.repositories.service_costs import (
    get_service_cost_by_client_and_order_type,
    normalize_order_type,
)


class OrderNotFound(LookupError):
    def __init__(self, order_type: str, order_id: str):
        self.order_type = order_type
        self.order_id = order_id
        super().__init__(f"{order_type} {order_id} not found")


class InvalidCostRequest(ValueError):
    """Rejected before any computation (bad week, unsupported order type)."""


def _cost_drop_cable(row: Mapping[str, Any], sheet: PriceSheet) -> CostResult:
    return calculate_drop_cable_cost(DropCableOrder.from_mapping(row), sheet)


def _cost_link_build(row: Mapping[str, Any], sheet: PriceSheet) -> CostResult:
    return calculate_link_build_cost(LinkBuildOrder.from_mapping(row), sheet)


CALCULATORS: Dict[str, Callable[[Mapping[str, Any], PriceSheet], CostResult]] = {
    DROP_CABLE: _cost_drop_cable,
    LINK_BUILD: _cost_link_build,
}


def load_price_sheet(db: Session, client_id: Optional[str], order_type: str) -> PriceSheet:
    """Resolve the client's price sheet; a missing row costs everything at zero."""
    row = None
    if client_id:
        row = get_service_cost_by_client_and_order_type(db, str(client_id), order_type)
    if row is None:
        logger.warning("price_sheet_missing", client_id=client_id, order_type=order_type)
        return PriceSheet.zero()
    return PriceSheet.from_row(row.to_dict(), settings.default_rates)


def get_order_costs(db: Session, order_type: str, order_id: str) -> Dict[str, Any]:
    order = get_order_by_id(db, order_type, order_id)
    if order is None:
        raise OrderNotFound(order_type, order_id)

    row = order.to_dict()
    sheet = load_price_sheet(db, row.get("client_id"), order_type)
    result = CALCULATORS[order_type](row, sheet)

    cost_calculation_counter.labels(order_type=order_type, scope="order").inc()
    logger.info(
        "order_costs_computed",
        order_type=order_type,
        order_id=order_id,
        total=result.total,
    )
    return result.to_dict()


def resolve_weekly_order_type(requested: Optional[str], expected: str) -> str:
    if requested is None or not str(requested).strip():
        return expected
    normalized = normalize_order_type(requested)
    if normalized != expected:
        raise InvalidCostRequest(f"Unsupported order_type: {requested}")
    return normalized


def get_weekly_totals(
    db: Session,
    expected_order_type: str,
    client_id: str,
    week: Any,
    order_type: Optional[str] = None,
) -> Dict[str, Any]:
    order_type = resolve_weekly_order_type(order_type, expected_order_type)

    canonical_week = canonicalize_week(week)
    if canonical_week is None:
        raise InvalidCostRequest("Invalid or missing week")

    orders = list_orders_for_client_and_week(db, client_id, order_type, canonical_week)
    sheet = load_price_sheet(db, client_id, order_type)
    calculate = CALCULATORS[order_type]

    items = [calculate(order.to_dict(), sheet).to_dict() for order in orders]
    total = round2(sum(item["total"] for item in items))

    cost_calculation_counter.labels(order_type=order_type, scope="weekly").inc()
    weekly_orders_hist.observe(len(items))
    logger.info(
        "weekly_totals_computed",
        order_type=order_type,
        client_id=client_id,
        week=canonical_week,
        count=len(items),
        total=total,
    )

    return {
        "client_id": client_id,
        "order_type": order_type,
        "week": canonical_week,
        "count": len(items),
        "total": total,
        "items": items,
    }
