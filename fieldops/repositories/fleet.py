# fieldops/repositories/fleet.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from fieldops.models.fleet import Vehicle


def list_vehicles(db: Session) -> List[Vehicle]:
    return db.query(Vehicle).order_by(Vehicle.created_at.desc()).all()


def get_vehicle(db: Session, vehicle_id: str) -> Vehicle | None:
    return db.query(Vehicle).filter(Vehicle.id == vehicle_id).first()


def create_vehicle(db: Session, payload: Dict[str, Any]) -> Vehicle:
    vehicle = Vehicle(**payload)
    db.add(vehicle)
    db.commit()
    db.refresh(vehicle)
    return vehicle


def update_vehicle(db: Session, vehicle_id: str, payload: Dict[str, Any]) -> Vehicle | None:
    vehicle = get_vehicle(db, vehicle_id)
    if not vehicle:
        return None
    for key, value in payload.items():
        setattr(vehicle, key, value)
    db.commit()
    db.refresh(vehicle)
    return vehicle


def delete_vehicle(db: Session, vehicle_id: str) -> Dict[str, Any] | None:
    vehicle = get_vehicle(db, vehicle_id)
    if not vehicle:
        return None
    snapshot = vehicle.to_dict()
    db.delete(vehicle)
    db.commit()
    return snapshot
