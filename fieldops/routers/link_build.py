# fieldops/routers/link_build.py
import re

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import ANY_ROLE, MANAGERS, AuthUser, require_role
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.orders import LINK_BUILD, delete_order, get_order_by_id, list_orders, list_orders_by
from fieldops.schemas.costs import WeeklyTotalsRequest
from fieldops.schemas.link_build import LinkBuildCreate, LinkBuildUpdate
from fieldops.services.order_costs import (
    InvalidCostRequest,
    OrderNotFound,
    get_order_costs,
    get_weekly_totals,
)
from fieldops.services.orders import InvalidOrderPayload, create_order_record, update_order_record

router = APIRouter(prefix="/link-build", tags=["link-build"])

NOT_FOUND = "Link build job not found"

# lichte check, de database dwingt het echte formaat af
_UUID_LIKE = re.compile(r"^[0-9a-fA-F-]{36}$")


@router.get("")
def get_link_builds(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    rows = list_orders(db, LINK_BUILD)
    return success_response([r.to_dict() for r in rows], "Link builds fetched")


@router.post("/weekly-totals")
def link_build_weekly_totals(
    body: WeeklyTotalsRequest,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    try:
        data = get_weekly_totals(
            db,
            LINK_BUILD,
            client_id=str(body.client_id),
            week=body.week,
            order_type=body.order_type,
        )
    except InvalidCostRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    return success_response(data, "Weekly totals computed")


@router.get("/client/{client_name}")
def get_link_builds_by_client(
    client_name: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    rows = list_orders_by(db, LINK_BUILD, client=client_name)
    return success_response([r.to_dict() for r in rows], "Link builds for client fetched")


@router.get("/technician/{technician_name}")
def get_link_builds_by_technician(
    technician_name: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    rows = list_orders_by(db, LINK_BUILD, technician=technician_name)
    return success_response([r.to_dict() for r in rows], "Link builds for technician fetched")


@router.get("/{order_id}/costs")
def get_link_build_costs(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    try:
        data = get_order_costs(db, LINK_BUILD, order_id)
    except OrderNotFound:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(data, "Order costs computed")


@router.get("/{order_id}")
def get_link_build(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    order = get_order_by_id(db, LINK_BUILD, order_id)
    if not order:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(order.to_dict(), "Link build job fetched")


@router.post("")
def add_link_build(
    body: LinkBuildCreate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    payload = body.model_dump(mode="json", exclude_unset=True)
    try:
        data = create_order_record(db, LINK_BUILD, payload)
    except InvalidOrderPayload as e:
        raise HTTPException(status_code=400, detail=str(e))
    return success_response(data, "Link build job created")


@router.put("")
def edit_link_build(
    body: LinkBuildUpdate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    payload = body.model_dump(mode="json", exclude_unset=True)
    order_id = payload.pop("id")
    try:
        data = update_order_record(db, LINK_BUILD, order_id, payload)
    except InvalidOrderPayload as e:
        raise HTTPException(status_code=400, detail=str(e))
    if data is None:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(data, "Link build job updated")


@router.delete("/{order_id}")
def delete_link_build(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    if not _UUID_LIKE.match(order_id):
        raise HTTPException(status_code=400, detail="Invalid id format")

    deleted = delete_order(db, LINK_BUILD, order_id)
    if deleted is None:
        return success_response(None, "No record found or already deleted")
    return success_response(deleted, "Link build job deleted")
