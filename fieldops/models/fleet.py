# fieldops/models/fleet.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.db import Base
from fieldops.models._base import RowMixin, new_uuid, utcnow


class Vehicle(RowMixin, Base):
    __tablename__ = "fleet"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)

    registration: Mapped[str] = mapped_column(String(20), index=True, nullable=False)
    make: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    model: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    vin: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    vehicle_type: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # toegewezen technicus (naam als vrije tekst, id naar staff)
    technician: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    technician_id: Mapped[Optional[str]] = mapped_column(String(36), index=True, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<Vehicle id={self.id} registration={self.registration!r}>"
