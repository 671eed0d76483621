# fieldops/models/link_build.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.db import Base
from fieldops.models._base import RowMixin, new_uuid, utcnow

_date = String(64)


class LinkBuild(RowMixin, Base):
    __tablename__ = "link_build"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    client_id: Mapped[Optional[str]] = mapped_column(ForeignKey("clients.id"), index=True, nullable=True)

    circuit_number: Mapped[Optional[str]] = mapped_column(String(100), index=True, nullable=True)
    site_b_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    county: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    pm: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    client: Mapped[Optional[str]] = mapped_column(String(200), index=True, nullable=True)
    client_contact_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    # ATP (acceptance test procedure)
    atp_pack_submitted: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    splice_and_float: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    check_date: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    submission_date: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    atp_pack_loaded: Mapped[Optional[str]] = mapped_column(_date, nullable=True)
    atp_date: Mapped[Optional[str]] = mapped_column(_date, nullable=True)

    # technical
    technician: Mapped[Optional[str]] = mapped_column(String(200), index=True, nullable=True)
    technician_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)
    no_of_fiber_pairs: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    link_distance: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    no_of_splices_after_15km: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    service_type: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    status: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    week: Mapped[Optional[str]] = mapped_column(String(16), index=True, nullable=True)
    quote_no: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    notes: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)
    # [{inventory_id, item_name, unit, used_quantity, timestamp}]
    inventory_used: Mapped[Optional[Any]] = mapped_column(JSON, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<LinkBuild id={self.id} circuit={self.circuit_number!r} week={self.week}>"
