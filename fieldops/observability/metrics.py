# fieldops/observability/metrics.py
from fastapi import APIRouter
from starlette.responses import Response

from prometheus_client import Counter, Histogram, generate_latest, CONTENT_TYPE_LATEST

router = APIRouter(tags=["observability"])

cost_calculation_counter = Counter(
    "fieldops_cost_calculations_total",
    "Aantal kostenberekeningen",
    ["order_type", "scope"],  # scope: order|weekly
)

weekly_orders_hist = Histogram(
    "fieldops_weekly_totals_orders",
    "Aantal orders per weekly-totals berekening",
    buckets=(0, 1, 5, 10, 25, 50, 100, 250, 500),
)

inventory_usage_counter = Counter(
    "fieldops_inventory_usage_total",
    "Aantal voorraadboekingen op jobs",
    ["source"],  # source: direct|request
)

latency_hist = Histogram(
    "fieldops_api_latency_seconds",
    "API latency per route",
    ["route"],
)


@router.get("/metrics", include_in_schema=True)
def metrics() -> Response:
    # Prometheus expects text/plain; version=0.0.4
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
