# fieldops/repositories/service_costs.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from fieldops.models._base import utcnow
from fieldops.models.service_cost import RATE_COLUMNS, ServiceCost


def normalize_order_type(order_type: str | None) -> str:
    return str(order_type or "").strip().lower().replace("-", "_")


def order_type_variants(order_type: str | None) -> List[str]:
    # historische data bevat zowel drop_cable als drop-cable
    normalized = normalize_order_type(order_type)
    return [normalized, normalized.replace("_", "-")]


def get_service_cost_by_client_and_order_type(
    db: Session, client_id: str, order_type: str
) -> ServiceCost | None:
    """Newest price sheet for (client, order_type); None when the client has none."""
    return (
        db.query(ServiceCost)
        .filter(
            ServiceCost.client_id == client_id,
            ServiceCost.order_type.in_(order_type_variants(order_type)),
        )
        .order_by(ServiceCost.updated_at.desc())
        .first()
    )


def upsert_service_cost(db: Session, payload: Dict[str, Any]) -> ServiceCost:
    client_id = payload["client_id"]
    order_type = normalize_order_type(payload["order_type"])

    row = get_service_cost_by_client_and_order_type(db, client_id, order_type)
    if row is None:
        row = ServiceCost(client_id=client_id, order_type=order_type)
        db.add(row)

    # alleen tariefkolommen; id en timestamps beheren we zelf
    for column in RATE_COLUMNS:
        if column in payload:
            setattr(row, column, payload[column])
    row.updated_at = utcnow()

    db.commit()
    db.refresh(row)
    return row
