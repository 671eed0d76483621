# fieldops/schemas/drop_cable.py
from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from fieldops.schemas.common import County, Notes

DropCableStatus = Literal[
    "awaiting_client_confirmation_date",
    "survey_required",
    "survey_scheduled",
    "survey_completed",
    "lla_required",
    "awaiting_lla_approval",
    "lla_received",
    "installation_scheduled",
    "installation_completed",
    "installation_complete_as_built_outstanding",
    "as_built_submitted",
    "issue_logged",
    "on_hold",
    "awaiting_health_and_safety",
    "planning_document_submitted",
    "awaiting_service_provider",
    "adw_required",
    "site_not_ready",
]

# kolommen die NOT NULL zijn in de tabel
NOT_NULL_FIELDS = (
    "client_id",
    "circuit_number",
    "site_b_name",
    "survey_planning",
    "callout",
    "installation",
    "spon_budi_opti",
    "splitter_install",
    "mousepad_install",
)


class DropCableFields(BaseModel):
    """All writable drop-cable columns. ``quote_no`` is derived and not accepted."""

    model_config = ConfigDict(str_strip_whitespace=True)

    client_id: Optional[UUID] = None
    circuit_number: Optional[str] = Field(None, min_length=1)

    site_b_name: Optional[str] = Field(None, min_length=1)
    county: Optional[County] = None
    physical_address_site_b: Optional[str] = None

    pm: Optional[str] = None
    client: Optional[str] = None
    client_contact_name: Optional[str] = None
    end_client_contact_name: Optional[str] = None
    end_client_contact_email: Optional[EmailStr] = None
    end_client_contact_phone: Optional[str] = None
    service_provider: Optional[str] = None
    link_manager: Optional[str] = None

    dpc_distance_meters: Optional[float] = Field(None, ge=0)

    survey_scheduled_date: Optional[str] = None
    survey_scheduled_time: Optional[str] = None
    survey_completed_at: Optional[str] = None
    installation_scheduled_date: Optional[str] = None
    installation_scheduled_time: Optional[str] = None
    installation_completed_date: Optional[str] = None
    lla_sent_at: Optional[str] = None
    lla_received_at: Optional[str] = None
    as_built_submitted_at: Optional[str] = None
    installation_complete_as_built_outstanding: Optional[str] = None
    order_received_at: Optional[str] = None
    installation_date_requested_at: Optional[str] = None
    survey_scheduled_for: Optional[str] = None

    week: Optional[str] = None

    technician_name: Optional[str] = None
    technician_id: Optional[str] = None

    # invoice details
    survey_planning: Optional[bool] = None
    callout: Optional[bool] = None
    installation: Optional[bool] = None
    spon_budi_opti: Optional[bool] = None
    splitter_install: Optional[bool] = None
    mousepad_install: Optional[bool] = None

    survey_multiplier: Optional[float] = Field(None, ge=0)
    callout_multiplier: Optional[float] = Field(None, ge=0)

    # percentage van de installatie die gefactureerd wordt (0-100)
    install_completion_percent: Optional[float] = Field(None, ge=0, le=100)

    additonal_cost: Optional[float] = Field(None, ge=0)
    additonal_cost_reason: Optional[str] = None

    status: Optional[DropCableStatus] = None
    notes: Optional[Notes] = None

    @field_validator(*NOT_NULL_FIELDS, mode="before")
    @classmethod
    def _not_null(cls, v):
        # weglaten mag, expliciet null niet: de kolommen zijn NOT NULL
        if v is None:
            raise ValueError("must not be null")
        return v


class DropCableCreate(DropCableFields):
    client_id: UUID
    circuit_number: str = Field(..., min_length=1)
    site_b_name: str = Field(..., min_length=1)


class DropCableUpdate(DropCableFields):
    id: UUID
