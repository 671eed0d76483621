# fieldops/models/drop_cable.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, Boolean, DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.db import Base
from fieldops.models._base import RowMixin, new_uuid, utcnow

_date = String(64)


class DropCable(RowMixin, Base):
    __tablename__ = "drop_cable"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    client_id: Mapped[str] = mapped_column(ForeignKey("clients.id"), index=True, nullable=False)

    circuit_number: Mapped[str] = mapped_column(String(100), index=True, nullable=False)

    # site
    site_b_name: Mapped[str] = mapped_column(String(200), nullable=False)
    county: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    physical_address_site_b: Mapped[Optional[str]] = mapped_column(String(300), nullable=True)

    # people
    pm: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    client: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    client_contact_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    end_client_contact_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    end_client_contact_email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    end_client_contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    service_provider: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    link_manager: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    dpc_distance_meters: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # timeline (stored as the strings the frontend sends)
    survey_scheduled_date: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    survey_scheduled_time: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    survey_completed_at: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    installation_scheduled_date: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    installation_scheduled_time: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    installation_completed_date: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    lla_sent_at: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    lla_received_at: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    as_built_submitted_at: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    installation_complete_as_built_outstanding: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    order_received_at: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    installation_date_requested_at: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    survey_scheduled_for: Mapped[Optional[str]] = mapped_column(_date, nullable=True)

    # invoicing
    week: Mapped[Optional[str]] = mapped_column(String(16), index=True, nullable=True)
    quote_no: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    survey_planning: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    callout: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    installation: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    spon_budi_opti: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    splitter_install: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    mousepad_install: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    survey_multiplier: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    callout_multiplier: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    install_completion_percent: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    additonal_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    additonal_cost_reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    # assignment / status
    technician_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    technician_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    notes: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    # [{inventory_id, item_name, unit, used_quantity, timestamp}]
    inventory_used: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<DropCable id={self.id} circuit={self.circuit_number!r} week={self.week}>"
