# fieldops/schemas/link_build.py
from typing import Any, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from fieldops.pricing.link_build import LinkBuildServiceType
from fieldops.schemas.common import County

LinkBuildStatus = Literal[
    "Not Started",
    "Work in Progress",
    "Completed",
    "Completed Asbuild Outstanding",
    "Cancelled",
    "On Hold",
    "Awaiting Health and Safety",
]


class LinkBuildCreate(BaseModel):
    circuit_number: Optional[str] = None
    client_id: Optional[UUID] = None

    site_b_name: Optional[str] = None
    county: Optional[County] = None

    pm: Optional[str] = None
    client: Optional[str] = None
    client_contact_name: Optional[str] = None

    # ATP details
    atp_pack_submitted: Optional[str] = None
    splice_and_float: Optional[str] = None
    check_date: Optional[str] = None
    submission_date: Optional[str] = None
    atp_pack_loaded: Optional[str] = None
    atp_date: Optional[str] = None

    technician: Optional[str] = None
    technician_id: Optional[str] = None
    no_of_fiber_pairs: Optional[int] = Field(None, ge=0)
    link_distance: Optional[float] = Field(None, ge=0)
    no_of_splices_after_15km: Optional[int] = Field(None, ge=0)
    service_type: Optional[LinkBuildServiceType] = None

    status: Optional[LinkBuildStatus] = None
    week: Optional[str] = None
    notes: Optional[Any] = None


class LinkBuildUpdate(LinkBuildCreate):
    id: UUID
