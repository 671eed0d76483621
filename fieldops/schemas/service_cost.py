# fieldops/schemas/service_cost.py
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field


class ServiceCostUpsert(BaseModel):
    client_id: UUID
    order_type: str = Field(..., min_length=1)

    survey_planning_cost: Optional[float] = None
    callout_cost: Optional[float] = None
    installation_cost: Optional[float] = None
    per_meter_rate: Optional[float] = None
    # multiplier, bv. 0.85 voor 15% korting
    discount: Optional[float] = Field(None, ge=0)
    spon_budi_opti_cost: Optional[float] = None
    splitter_install_cost: Optional[float] = None
    mousepad_install_cost: Optional[float] = None

    full_splice_cost: Optional[float] = None
    full_splice_float_cost: Optional[float] = None
    full_splice_broadband_cost: Optional[float] = None
    access_float_cost: Optional[float] = None
    link_build_discount_15_cost: Optional[float] = None
    link_build_broadband_discount_15_cost: Optional[float] = None
    link_build_float_discount_15_cost: Optional[float] = None
    splice_per_km_after_15_cost: Optional[float] = None
