# fieldops/routers/fleet.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import ANY_ROLE, MANAGERS, AuthUser, require_role
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.fleet import (
    create_vehicle,
    delete_vehicle,
    get_vehicle,
    list_vehicles,
    update_vehicle,
)
from fieldops.schemas.fleet import VehicleCreate, VehicleUpdate

router = APIRouter(prefix="/fleet", tags=["fleet"])

NOT_FOUND = "Fleet item not found"


@router.get("")
def get_fleet(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    return success_response([v.to_dict() for v in list_vehicles(db)], "Fleet fetched")


@router.get("/{vehicle_id}")
def get_fleet_item(
    vehicle_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    vehicle = get_vehicle(db, vehicle_id)
    if not vehicle:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(vehicle.to_dict(), "Fleet item fetched")


@router.post("")
def add_fleet_item(
    body: VehicleCreate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    vehicle = create_vehicle(db, body.model_dump(mode="json", exclude_unset=True))
    return success_response(vehicle.to_dict(), "Fleet item created")


@router.put("/{vehicle_id}")
def edit_fleet_item(
    vehicle_id: str,
    body: VehicleUpdate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    vehicle = update_vehicle(db, vehicle_id, body.model_dump(mode="json", exclude_unset=True))
    if not vehicle:
        raise HTTPException(status_code=404, detail=NOT_FOUND)
    return success_response(vehicle.to_dict(), "Fleet item updated")


@router.delete("/{vehicle_id}")
def remove_fleet_item(
    vehicle_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*MANAGERS)),
):
    deleted = delete_vehicle(db, vehicle_id)
    if deleted is None:
        return success_response(None, "No record found or already deleted")
    return success_response(deleted, "Fleet item deleted")
