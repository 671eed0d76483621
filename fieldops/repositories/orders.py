# fieldops/repositories/orders.py
"""
Persistence for drop-cable and link-build orders.

Both order tables share the same access patterns, so every function takes the
order type and resolves the ORM model from ``ORDER_MODELS``.
"""
from typing import Any, Dict, List, Type, Union

from sqlalchemy.orm import Session

from fieldops.models.drop_cable import DropCable
from fieldops.models.link_build import LinkBuild

DROP_CABLE = "drop_cable"
LINK_BUILD = "link_build"

OrderRow = Union[DropCable, LinkBuild]

ORDER_MODELS: Dict[str, Type[OrderRow]] = {
    DROP_CABLE: DropCable,
    LINK_BUILD: LinkBuild,
}


def _model(order_type: str) -> Type[OrderRow]:
    try:
        return ORDER_MODELS[order_type]
    except KeyError:
        raise ValueError(f"Unsupported order_type: {order_type}")


def list_orders(db: Session, order_type: str) -> List[OrderRow]:
    model = _model(order_type)
    return db.query(model).order_by(model.created_at.desc()).all()


def get_order_by_id(db: Session, order_type: str, order_id: str) -> OrderRow | None:
    model = _model(order_type)
    return db.query(model).filter(model.id == order_id).first()


def list_orders_by(db: Session, order_type: str, **filters: Any) -> List[OrderRow]:
    model = _model(order_type)
    query = db.query(model)
    for column, value in filters.items():
        query = query.filter(getattr(model, column) == value)
    return query.order_by(model.created_at.desc()).all()


def list_orders_for_client_and_week(
    db: Session, client_id: str, order_type: str, canonical_week: str
) -> List[OrderRow]:
    model = _model(order_type)
    return (
        db.query(model)
        .filter(model.client_id == client_id, model.week == canonical_week)
        .order_by(model.created_at.asc())
        .all()
    )


def create_order(db: Session, order_type: str, payload: Dict[str, Any]) -> OrderRow:
    order = _model(order_type)(**payload)
    db.add(order)
    db.commit()
    db.refresh(order)
    return order


def update_order(
    db: Session, order_type: str, order_id: str, payload: Dict[str, Any]
) -> OrderRow | None:
    order = get_order_by_id(db, order_type, order_id)
    if not order:
        return None
    for key, value in payload.items():
        setattr(order, key, value)
    db.commit()
    db.refresh(order)
    return order


def delete_order(db: Session, order_type: str, order_id: str) -> Dict[str, Any] | None:
    """Deletes the row and returns its last state (None when absent)."""
    order = get_order_by_id(db, order_type, order_id)
    if not order:
        return None
    snapshot = order.to_dict()
    db.delete(order)
    db.commit()
    return snapshot
