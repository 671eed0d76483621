# fieldops/routers/drop_cable.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import ANY_ROLE, MANAGERS, AuthUser, require_role
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.orders import DROP_CABLE, delete_order, get_order_by_id, list_orders, list_orders_by
from fieldops.schemas.costs import WeeklyTotalsRequest
from fieldops.schemas.drop_cable import DropCableCreate, DropCableUpdate
from fieldops.services.order_costs import (
    InvalidCostRequest,
    OrderNotFound,
    get_order_costs,
    get_weekly_totals,
)
from fieldops.services.orders import InvalidOrderPayload, create_order_record, update_order_record

router = APIRouter(prefix="/drop-cable", tags=["drop-cable"])

NOT_FOUND = "Drop cable job not found"


@router.get("")
def get_drop_cables(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    rows = list_orders(db, DROP_CABLE)
    return success_response([r.to_dict() for r in rows], "Drop cables fetched")


@router.post("/weekly-totals")
def drop_cable_weekly_totals(
    body: WeeklyTotalsRequest,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    try:
        data = get_weekly_totals(
            db,
            DROP_CABLE,
            client_id=str(body.client_id),
            week=body.week,
            order_type=body.order_type,
        )
    except InvalidCostRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    return success_response(data, "Weekly totals computed")


@router.get("/client/{client_id}")
def get_drop_cables_by_client(
    client_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    rows = list_orders_by(db, DROP_CABLE, client_id=client_id)
    return success_response([r.to_dict() for r in rows], "Drop cables for client fetched")


@router.get("/technician/{technician_id}")
def get_drop_cables_by_technician(
    technician_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    rows = list_orders_by(db, DROP_CABLE, technician_id=technician_id)
    return success_response([r.to_dict() for r in rows], "Drop cables for technician fetched")


@router.get("/{order_id}/costs")
def get_drop_cable_costs(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    try:
        data = get_order_costs(db, DROP_CABLE, order_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(data, "Order costs computed")


@router.get("/{order_id}")
def get_drop_cable(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    order = get_order_by_id(db, DROP_CABLE, order_id)
    if not order:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(order.to_dict(), "Drop cable job fetched")


@router.post("")
def add_drop_cable(
    body: DropCableCreate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    payload = body.model_dump(mode="json", exclude_unset=True)
    try:
        data = create_order_record(db, DROP_CABLE, payload)
    except InvalidOrderPayload as e:
        raise HTTPException(status_code=400, detail=str(e))
    return success_response(data, "Drop cable job created")


@router.put("")
def edit_drop_cable(
    body: DropCableUpdate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    payload = body.model_dump(mode="json", exclude_unset=True)
    order_id = payload.pop("id")
    try:
        data = update_order_record(db, DROP_CABLE, order_id, payload)
    except InvalidOrderPayload as e:
        raise HTTPException(status_code=400, detail=str(e))
    if data is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(data, "Drop cable job updated")


@router.delete("/{order_id}")
def delete_drop_cable(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    deleted = delete_order(db, DROP_CABLE, order_id)
    if deleted is None:
        return success_response(None, "No record found or already deleted")
    return success_response(deleted, "Drop cable job deleted")
