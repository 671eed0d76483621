# fieldops/repositories/clients.py
from typing import Any, Dict, List

from sqlalchemy.orm import Session

from fieldops.models.client import Client


def list_clients(db: Session) -> List[Client]:
    return db.query(Client).order_by(Client.created_at.desc()).all()


def get_client_by_id(db: Session, client_id: str) -> Client | None:
    return db.query(Client).filter(Client.id == client_id).first()


def create_client(db: Session, payload: Dict[str, Any]) -> Client:
    client = Client(**payload)
    db.add(client)
    db.commit()
    db.refresh(client)
    return client


def update_client(db: Session, client_id: str, payload: Dict[str, Any]) -> Client | None:
    client = get_client_by_id(db, client_id)
    if not client:
        return None
    for key, value in payload.items():
        setattr(client, key, value)
    db.commit()
    db.refresh(client)
    return client
