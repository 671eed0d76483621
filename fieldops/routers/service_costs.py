# fieldops/routers/service_costs.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from fieldops.auth.deps import ADMINS, AuthUser, require_role
from fieldops.core.logging_config import logger
from fieldops.core.responses import success_response
from fieldops.db import get_db
from fieldops.repositories.service_costs import (
    get_service_cost_by_client_and_order_type,
    upsert_service_cost,
)
from fieldops.schemas.service_cost import ServiceCostUpsert

router = APIRouter(prefix="/service-costs", tags=["service-costs"])


@router.get("/{client_id}/{order_type}")
def get_service_cost(
    client_id: str,
    order_type: str,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    row = get_service_cost_by_client_and_order_type(db, client_id, order_type)
    if not row:
        raise HTTPException(status_code=404, detail="Service cost not found")
    return success_response(row.to_dict(), "Service cost fetched")


@router.put("")
def put_service_cost(
    body: ServiceCostUpsert,
    db: Session = Depends(get_db),
    user: AuthUser = Depends(require_role(*ADMINS)),
):
    row = upsert_service_cost(db, body.model_dump(mode="json", exclude_unset=True))
    logger.info("service_cost_saved", client_id=row.client_id, order_type=row.order_type, by=user.id)
    return success_response(row.to_dict(), "Service cost saved")
