# fieldops/repositories/inventory_requests.py
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from fieldops.models.inventory import InventoryRequest


def list_inventory_requests(db: Session, status: Optional[str] = None) -> List[InventoryRequest]:
    query = db.query(InventoryRequest)
    if status:
        query = query.filter(InventoryRequest.status == status)
    return query.order_by(InventoryRequest.requested_at.desc()).all()


def count_pending_requests(db: Session) -> int:
    return (
        db.query(func.count(InventoryRequest.id))
        .filter(InventoryRequest.status == "pending")
        .scalar()
        or 0
    )


def get_inventory_request(db: Session, request_id: str) -> InventoryRequest | None:
    return db.query(InventoryRequest).filter(InventoryRequest.id == request_id).first()


def list_requests_by(db: Session, **filters: Any) -> List[InventoryRequest]:
    query = db.query(InventoryRequest)
    for column, value in filters.items():
        query = query.filter(getattr(InventoryRequest, column) == value)
    return query.order_by(InventoryRequest.requested_at.desc()).all()


def create_inventory_request(db: Session, payload: Dict[str, Any]) -> InventoryRequest:
    request = InventoryRequest(**payload)
    db.add(request)
    db.commit()
    db.refresh(request)
    return request
