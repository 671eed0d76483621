# fieldops/routers/inventory_requests.py
"""
Review queue for stock requests submitted from the mobile app.

Managers can read the queue; only a super admin approves or rejects.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import MANAGERS, AuthUser, require_role
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.inventory_requests import (
    count_pending_requests,
    get_inventory_request,
    list_inventory_requests,
)
from fieldops.schemas.inventory import InventoryRequestReject, RequestStatus
from fieldops.services.inventory import (
    InvalidInventoryRequest,
    InventoryRequestNotFound,
    JobNotFound,
    approve_inventory_request,
    describe_request,
    reject_inventory_request,
)

router = APIRouter(prefix="/inventory-requests", tags=["inventory-requests"])


@router.get("")
def get_inventory_requests(
    status: Optional[RequestStatus] = None,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    rows = list_inventory_requests(db, status)
    return success_response([describe_request(db, r) for r in rows], "Inventory requests fetched")


@router.get("/pending/count")
def get_pending_count(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    return success_response({"count": count_pending_requests(db)}, "Pending count fetched")


@router.get("/{request_id}")
def get_inventory_request_by_id(
    request_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    request = get_inventory_request(db, request_id)
    if not request:
        raise HTTPException(status_code=404, detail="Request not found")
    return success_response(describe_request(db, request), "Inventory request fetched")


@router.put("/{request_id}/approve")
def approve_request(
    request_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role("super_admin")),
):
    try:
        request = approve_inventory_request(db, request_id, user.id)
    except InvalidInventoryRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except (InventoryRequestNotFound, JobNotFound) as e:
        raise HTTPException(status_code=404, detail=str(e))
    return success_response(request.to_dict(), "Request approved")


@router.put("/{request_id}/reject")
def reject_request(
    request_id: str,
    body: Optional[InventoryRequestReject] = None,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role("super_admin")),
):
    reason = body.reason if body else None
    try:
        request = reject_inventory_request(db, request_id, user.id, reason)
    except InvalidInventoryRequest as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InventoryRequestNotFound as e:
        raise HTTPException(status_code=404, detail=str(e))
    return success_response(request.to_dict(), "Request rejected")
