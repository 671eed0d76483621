from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from fieldops.core.logging_config import logger
from fieldops.repositories.clients import get_client_by_id
from fieldops.repositories.orders import create_order, get_order_by_id, update_order
from fieldops.services.order_payloads import prepare_create_payload, prepare_update_payload


class InvalidOrderPayload(ValueError):
    """Rejected before anything is written."""


def _check_client(db: Session, payload: Dict[str, Any]) -> None:
    client_id = payload.get("client_id")
    if client_id and get_client_by_id(db, str(client_id)) is None:
        raise InvalidOrderPayload("Client not found")


def create_order_record(db: Session, order_type: str, payload: Dict[str, Any]) -> Dict[str, Any]:
    _check_client(db, payload)
    data = prepare_create_payload(db, payload)
    order = create_order(db, order_type, data)
    logger.info("order_created", order_type=order_type, order_id=order.id, week=order.week)
    return order.to_dict()


def update_order_record(
    db: Session, order_type: str, order_id: str, payload: Dict[str, Any]
) -> Optional[Dict[str, Any]]:
    """None when the order does not exist."""
    existing = get_order_by_id(db, order_type, order_id)
    if existing is None:
        return None

    _check_client(db, payload)
    data = prepare_update_payload(db, payload, existing.to_dict())
    order = update_order(db, order_type, order_id, data)
    logger.info("order_updated", order_type=order_type, order_id=order_id, fields=sorted(data))
    return order.to_dict() if order else None
