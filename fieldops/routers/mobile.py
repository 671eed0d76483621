# fieldops/routers/mobile.py
"""
Mobile app endpoints.

Technicians see the orders assigned to their staff record. Orders are linked by
the staff table id, never by the auth user id. Technicians can book stock on
their own jobs directly or through a request that a super admin reviews.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import AuthUser, verify_bearer
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.inventory import list_inventory
from fieldops.repositories.inventory_requests import list_requests_by
from fieldops.repositories.orders import DROP_CABLE, LINK_BUILD, get_order_by_id, list_orders_by
from fieldops.repositories.staff import get_staff_by_auth_user_id
from fieldops.schemas.inventory import InventoryRequestCreate, InventoryUsage
from fieldops.services.inventory import (
    InvalidInventoryRequest,
    InventoryItemNotFound,
    JobNotFound,
    NotAssigned,
    apply_inventory_usage,
    describe_request,
    job_inventory_used,
    resolve_job_type,
    submit_inventory_request,
)
from fieldops.services.order_costs import get_order_costs

router = APIRouter(prefix="/mobile", tags=["mobile"])

DROP_CABLE_LIST_FIELDS = (
    "id",
    "circuit_number",
    "site_b_name",
    "status",
    "client",
    "county",
    "installation_scheduled_date",
    "survey_scheduled_date",
    "created_at",
)

LINK_BUILD_LIST_FIELDS = (
    "id",
    "circuit_number",
    "site_b_name",
    "status",
    "client",
    "county",
    "week",
    "created_at",
)

INVENTORY_LIST_FIELDS = ("id", "item_name", "item_code", "category", "quantity", "unit")


def _pick(row: dict, fields) -> dict:
    return {f: row.get(f) for f in fields}


@router.get("/orders/{technician_id}")
def get_technician_orders(
    technician_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    # alleen je eigen orders
    if user.id != technician_id:
        raise HTTPException(status_code=403, detail="Unauthorized")

    staff = get_staff_by_auth_user_id(db, technician_id)
    if not staff:
        return success_response(
            {"drop_cables": [], "link_builds": [], "total": 0},
            "No staff record found",
        )

    drop_cables = [
        _pick(r.to_dict(), DROP_CABLE_LIST_FIELDS)
        for r in list_orders_by(db, DROP_CABLE, technician_id=staff.id)
    ]
    link_builds = [
        _pick(r.to_dict(), LINK_BUILD_LIST_FIELDS)
        for r in list_orders_by(db, LINK_BUILD, technician_id=staff.id)
    ]

    return success_response(
        {
            "drop_cables": drop_cables,
            "link_builds": link_builds,
            "total": len(drop_cables) + len(link_builds),
        },
        "Orders fetched",
    )


@router.get("/drop-cable/{order_id}/costs")
def get_own_drop_cable_costs(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    order = get_order_by_id(db, DROP_CABLE, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Drop cable not found")

    staff = get_staff_by_auth_user_id(db, user.id)
    if not staff or order.technician_id != staff.id:
        raise HTTPException(status_code=403, detail="Unauthorized")

    return success_response(get_order_costs(db, DROP_CABLE, order_id), "Order costs computed")


@router.get("/drop-cable/{order_id}")
def get_mobile_drop_cable(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    order = get_order_by_id(db, DROP_CABLE, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Drop cable not found")
    return success_response(order.to_dict(), "Drop cable fetched")


@router.get("/link-build/{order_id}")
def get_mobile_link_build(
    order_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    order = get_order_by_id(db, LINK_BUILD, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Link build not found")
    return success_response(order.to_dict(), "Link build fetched")


def _staff_or_400(db: Session, user: AuthUser):
    staff = get_staff_by_auth_user_id(db, user.id)
    if not staff:
        raise HTTPException(status_code=400, detail="No staff record found")
    return staff


@router.get("/inventory")
def get_mobile_inventory(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    items = [_pick(i.to_dict(), INVENTORY_LIST_FIELDS) for i in list_inventory(db)]
    return success_response(items, "Inventory fetched")


@router.get("/inventory/job/{job_id}")
def get_job_inventory(
    job_id: str,
    job_type: str = DROP_CABLE,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    try:
        data = job_inventory_used(db, job_type, job_id)
    except InvalidInventoryRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except JobNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return success_response(data, "Job inventory fetched")


@router.post("/inventory/usage")
def book_own_inventory_usage(
    body: InventoryUsage,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    staff = _staff_or_400(db, user)
    payload = body.model_dump()
    try:
        data = apply_inventory_usage(
            db, payload["job_type"], payload["job_id"], payload["items"], assigned_to=staff.id
        )
    except InvalidInventoryRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotAssigned as e:
        raise HTTPException(status_code=403, detail=str(e))
    except (JobNotFound, InventoryItemNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    return success_response(data, "Inventory usage applied")


@router.get("/inventory/requests")
def get_own_inventory_requests(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    staff = get_staff_by_auth_user_id(db, user.id)
    if not staff:
        return success_response([], "No staff record found")
    rows = list_requests_by(db, technician_id=staff.id)
    return success_response([describe_request(db, r) for r in rows], "Inventory requests fetched")


@router.get("/inventory/requests/job/{job_id}")
def get_job_inventory_requests(
    job_id: str,
    job_type: Optional[str] = None,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    filters = {"job_id": job_id}
    if job_type:
        try:
            filters["job_type"] = resolve_job_type(job_type)
        except InvalidInventoryRequest as e:
            raise HTTPException(status_code=400, detail=str(e))
    rows = list_requests_by(db, **filters)
    return success_response([describe_request(db, r) for r in rows], "Inventory requests fetched")


@router.post("/inventory/requests")
def submit_own_inventory_request(
    body: InventoryRequestCreate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(verify_bearer),
):
    staff = _staff_or_400(db, user)
    payload = body.model_dump()
    try:
        request = submit_inventory_request(db, staff, payload["job_type"], payload["job_id"], payload["items"])
    except InvalidInventoryRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except NotAssigned as e:
        raise HTTPException(status_code=403, detail=str(e))
    except JobNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return success_response(describe_request(db, request), "Inventory request submitted")
