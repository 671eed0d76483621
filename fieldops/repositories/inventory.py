# fieldops/repositories/inventory.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from fieldops.models.inventory import InventoryItem


def list_inventory(db: Session) -> List[InventoryItem]:
    return db.query(InventoryItem).order_by(InventoryItem.item_name.asc()).all()


def get_inventory_item(db: Session, item_id: str) -> InventoryItem | None:
    return db.query(InventoryItem).filter(InventoryItem.id == item_id).first()


def create_inventory_item(db: Session, payload: Dict[str, Any]) -> InventoryItem:
    item = InventoryItem(**payload)
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def update_inventory_item(db: Session, item_id: str, payload: Dict[str, Any]) -> InventoryItem | None:
    item = get_inventory_item(db, item_id)
    if not item:
        return None
    for key, value in payload.items():
        setattr(item, key, value)
    db.commit()
    db.refresh(item)
    return item


def delete_inventory_item(db: Session, item_id: str) -> Dict[str, Any] | None:
    item = get_inventory_item(db, item_id)
    if not item:
        return None
    snapshot = item.to_dict()
    db.delete(item)
    db.commit()
    return snapshot
