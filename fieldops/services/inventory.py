# fieldops/services/inventory.py
"""
Stock booked on jobs.

Direct usage (admin or technician) and approved requests both append entries to
the job's ``inventory_used`` list and decrement stock, clamped at zero. Every
change to stock, job and request is committed together.
"""
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from sqlalchemy.orm import Session

from fieldops.core.logging_config import logger
from fieldops.models._base import utcnow
from fieldops.models.inventory import InventoryItem, InventoryRequest
from fieldops.models.staff import Staff
from fieldops.observability.metrics import inventory_usage_counter
from fieldops.repositories.inventory import get_inventory_item
from fieldops.repositories.inventory_requests import create_inventory_request, get_inventory_request
from fieldops.repositories.orders import ORDER_MODELS, OrderRow, get_order_by_id
from fieldops.repositories.service_costs import normalize_order_type
from fieldops.repositories.staff import get_staff_by_auth_user_id


class JobNotFound(LookupError):
    pass


class InventoryItemNotFound(LookupError):
    def __init__(self, inventory_id: str):
        self.inventory_id = inventory_id
        super().__init__("Inventory item not found")


class InventoryRequestNotFound(LookupError):
    pass


class NotAssigned(PermissionError):
    """The job is not assigned to the calling technician."""


class InvalidInventoryRequest(ValueError):
    """Rejected before anything is written."""


def resolve_job_type(job_type: Optional[str]) -> str:
    normalized = normalize_order_type(job_type)
    if normalized not in ORDER_MODELS:
        raise InvalidInventoryRequest(f"Unsupported job_type: {job_type}")
    return normalized


def _load_job(db: Session, job_type: str, job_id: str, assigned_to: Optional[str] = None) -> OrderRow:
    job = get_order_by_id(db, job_type, job_id)
    if job is None:
        raise JobNotFound("Job not found")
    if assigned_to is not None and job.technician_id != assigned_to:
        raise NotAssigned("Unauthorized")
    return job


def _usage_entry(item: Mapping[str, Any], stock: Optional[InventoryItem], timestamp: str) -> Dict[str, Any]:
    return {
        "inventory_id": item["inventory_id"],
        "item_name": item.get("item_name") or (stock.item_name if stock else None),
        "unit": item.get("unit") or (stock.unit if stock else None),
        "used_quantity": item["quantity"],
        "timestamp": timestamp,
    }


def _book(
    job: OrderRow,
    items: Iterable[Mapping[str, Any]],
    stock: Mapping[str, Optional[InventoryItem]],
) -> List[Dict[str, Any]]:
    """Decrement stock and append usage entries; the caller commits."""
    timestamp = utcnow().isoformat()
    entries = []
    for item in items:
        row = stock.get(item["inventory_id"])
        if row is not None:
            # voorraad gaat nooit onder nul
            row.quantity = max(0, (row.quantity or 0) - item["quantity"])
        entries.append(_usage_entry(item, row, timestamp))

    existing = job.inventory_used if isinstance(job.inventory_used, list) else []
    job.inventory_used = [*existing, *entries]
    return entries


def job_inventory_used(db: Session, job_type: str, job_id: str) -> Dict[str, Any]:
    job_type = resolve_job_type(job_type)
    job = _load_job(db, job_type, job_id)
    used = job.inventory_used if isinstance(job.inventory_used, list) else []
    return {"job_id": job.id, "job_type": job_type, "inventory_used": used}


def apply_inventory_usage(
    db: Session,
    job_type: str,
    job_id: str,
    items: List[Mapping[str, Any]],
    *,
    assigned_to: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Book ``items`` on a job straight away.

    Every inventory id must exist; nothing is written otherwise. ``assigned_to``
    (a staff id) restricts the call to jobs assigned to that technician.
    """
    job_type = resolve_job_type(job_type)
    job = _load_job(db, job_type, job_id, assigned_to)

    stock: Dict[str, Optional[InventoryItem]] = {}
    for item in items:
        row = get_inventory_item(db, item["inventory_id"])
        if row is None:
            raise InventoryItemNotFound(item["inventory_id"])
        stock[row.id] = row

    entries = _book(job, items, stock)
    db.commit()
    db.refresh(job)

    inventory_usage_counter.labels(source="direct").inc()
    logger.info("inventory_usage_applied", job_type=job_type, job_id=job_id, items=len(entries))
    return {"job": job.to_dict(), "items": entries}


def submit_inventory_request(
    db: Session,
    technician: Staff,
    job_type: str,
    job_id: str,
    items: List[Mapping[str, Any]],
) -> InventoryRequest:
    job_type = resolve_job_type(job_type)
    _load_job(db, job_type, job_id, technician.id)

    request = create_inventory_request(
        db,
        {
            "job_id": job_id,
            "job_type": job_type,
            "technician_id": technician.id,
            "items": [dict(item) for item in items],
            "status": "pending",
            "requested_at": utcnow(),
        },
    )
    logger.info("inventory_request_submitted", request_id=request.id, job_type=job_type, job_id=job_id)
    return request


def _reviewer(db: Session, reviewer_auth_id: str) -> Staff:
    staff = get_staff_by_auth_user_id(db, reviewer_auth_id)
    if staff is None:
        raise InvalidInventoryRequest("Unable to find staff record for reviewer")
    return staff


def _pending_request(db: Session, request_id: str) -> InventoryRequest:
    request = get_inventory_request(db, request_id)
    if request is None:
        raise InventoryRequestNotFound("Request not found")
    if request.status != "pending":
        raise InvalidInventoryRequest("Request not found or already processed")
    return request


def approve_inventory_request(db: Session, request_id: str, reviewer_auth_id: str) -> InventoryRequest:
    """
    Approve a pending request and book its items on the job.

    Items whose inventory row has since been deleted are still recorded on the
    job but leave stock untouched.
    """
    reviewer = _reviewer(db, reviewer_auth_id)
    request = _pending_request(db, request_id)
    job = _load_job(db, resolve_job_type(request.job_type), request.job_id)

    items = request.items or []
    stock: Dict[str, Optional[InventoryItem]] = {}
    for item in items:
        row = get_inventory_item(db, item["inventory_id"])
        if row is None:
            logger.warning("inventory_item_missing", request_id=request_id, inventory_id=item["inventory_id"])
        stock[item["inventory_id"]] = row

    _book(job, items, stock)
    request.status = "approved"
    request.reviewed_at = utcnow()
    request.reviewed_by = reviewer.id
    db.commit()
    db.refresh(request)

    inventory_usage_counter.labels(source="request").inc()
    logger.info("inventory_request_approved", request_id=request_id, reviewed_by=reviewer.id)
    return request


def reject_inventory_request(
    db: Session, request_id: str, reviewer_auth_id: str, reason: Optional[str] = None
) -> InventoryRequest:
    reviewer = _reviewer(db, reviewer_auth_id)
    request = _pending_request(db, request_id)

    request.status = "rejected"
    request.reviewed_at = utcnow()
    request.reviewed_by = reviewer.id
    request.rejection_reason = reason or None
    db.commit()
    db.refresh(request)

    logger.info("inventory_request_rejected", request_id=request_id, reviewed_by=reviewer.id)
    return request


def describe_request(db: Session, request: InventoryRequest) -> Dict[str, Any]:
    """Request row plus the technician and the job's circuit and site."""
    data = request.to_dict()

    technician = db.get(Staff, request.technician_id)
    data["technician"] = (
        {
            "id": technician.id,
            "first_name": technician.first_name,
            "surname": technician.surname,
            "email": technician.email,
        }
        if technician
        else None
    )

    job = None
    if normalize_order_type(request.job_type) in ORDER_MODELS:
        job = get_order_by_id(db, normalize_order_type(request.job_type), request.job_id)
    data["circuit_number"] = job.circuit_number if job else None
    data["site_name"] = job.site_b_name if job else None
    return data
