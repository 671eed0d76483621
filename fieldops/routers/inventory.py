# fieldops/routers/inventory.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import ADMINS, AuthUser, require_role
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.inventory import (
    create_inventory_item,
    delete_inventory_item,
    get_inventory_item,
    list_inventory,
    update_inventory_item,
)
from fieldops.schemas.inventory import InventoryCreate, InventoryUpdate, InventoryUsage
from fieldops.services.inventory import (
    InvalidInventoryRequest,
    InventoryItemNotFound,
    JobNotFound,
    apply_inventory_usage,
)

router = APIRouter(prefix="/inventory", tags=["inventory"])

NOT_FOUND = "Inventory item not found"


@router.get("")
def get_inventory(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    return success_response([i.to_dict() for i in list_inventory(db)], "Inventory fetched")


@router.post("/usage")
def book_inventory_usage(
    body: InventoryUsage,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    payload = body.model_dump()
    try:
        data = apply_inventory_usage(db, payload["job_type"], payload["job_id"], payload["items"])
    except InvalidInventoryRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (JobNotFound, InventoryItemNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    return success_response(data, "Inventory usage applied")


@router.get("/{item_id}")
def get_inventory_entry(
    item_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    item = get_inventory_item(db, item_id)
    if not item:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(item.to_dict(), "Inventory item fetched")


@router.post("")
def add_inventory_item(
    body: InventoryCreate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    item = create_inventory_item(db, body.model_dump(exclude_unset=True))
    return success_response(item.to_dict(), "Inventory item created")


@router.patch("/{item_id}")
def edit_inventory_item(
    item_id: str,
    body: InventoryUpdate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    item = update_inventory_item(db, item_id, body.model_dump(exclude_unset=True))
    if not item:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(item.to_dict(), "Inventory item updated")


@router.delete("/{item_id}")
def remove_inventory_item(
    item_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    deleted = delete_inventory_item(db, item_id)
    if deleted is None:
        return success_response(None, "No record found or already deleted")
    return success_response(deleted, "Inventory item deleted")
