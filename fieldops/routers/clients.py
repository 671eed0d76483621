# fieldops/routers/clients.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import ADMINS, ANY_ROLE, AuthUser, require_role
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.clients import create_client, get_client_by_id, list_clients, update_client
from fieldops.schemas.client import ClientCreate, ClientUpdate

router = APIRouter(prefix="/clients", tags=["clients"])


@router.get("")
def get_clients(
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    return success_response([c.to_dict() for c in list_clients(db)], "Clients fetched")


@router.get("/{client_id}")
def get_client(
    client_id: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ANY_ROLE)),
):
    client = get_client_by_id(db, client_id)
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return success_response(client.to_dict(), "Client fetched")


@router.post("")
def add_client(
    body: ClientCreate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    client = create_client(db, body.model_dump(exclude_unset=True))
    return success_response(client.to_dict(), "Client created")


@router.put("/{client_id}")
def edit_client(
    client_id: str,
    body: ClientUpdate,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    client = update_client(db, client_id, body.model_dump(exclude_unset=True))
    if not client:
        raise HTTPException(status_code=404, detail="Client not found")
    return success_response(client.to_dict(), "Client updated")
