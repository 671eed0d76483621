# fieldops/models/inventory.py
from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from sqlalchemy import JSON, DateTime, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.db import Base
from fieldops.models._base import RowMixin, new_uuid, utcnow


class InventoryItem(RowMixin, Base):
    """Stock item; ``quantity`` never drops below zero."""

    __tablename__ = "inventory"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)

    item_name: Mapped[str] = mapped_column(String(200), index=True, nullable=False)
    item_code: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    unit: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    minimum_quantity: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    reorder_level: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    supplier_name: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    supplier_contact: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(200), nullable=True)

    cost_price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    selling_price: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    def __repr__(self) -> str:
        return f"<InventoryItem id={self.id} name={self.item_name!r} qty={self.quantity}>"


class InventoryRequest(RowMixin, Base):
    """A technician's request to book stock on a job, pending until reviewed."""

    __tablename__ = "inventory_requests"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)

    job_id: Mapped[str] = mapped_column(String(36), index=True, nullable=False)
    job_type: Mapped[str] = mapped_column(String(32), nullable=False)
    technician_id: Mapped[str] = mapped_column(ForeignKey("staff.id"), index=True, nullable=False)

    # [{inventory_id, quantity, item_name, unit}]
    items: Mapped[Any] = mapped_column(JSON, nullable=False)

    status: Mapped[str] = mapped_column(String(16), index=True, nullable=False, default="pending")
    requested_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    reviewed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), nullable=True)
    reviewed_by: Mapped[Optional[str]] = mapped_column(String(36), nullable=True)
    rejection_reason: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    def __repr__(self) -> str:
        return f"<InventoryRequest id={self.id} job={self.job_type}:{self.job_id} status={self.status}>"
