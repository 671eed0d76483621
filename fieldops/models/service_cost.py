# fieldops/models/service_cost.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, Float, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.db import Base
from fieldops.models._base import RowMixin, new_uuid, utcnow

# every rate column a price sheet carries; the only columns an upsert writes
RATE_COLUMNS = (
    "survey_planning_cost",
    "callout_cost",
    "installation_cost",
    "per_meter_rate",
    "discount",
    "spon_budi_opti_cost",
    "splitter_install_cost",
    "mousepad_install_cost",
    "full_splice_cost",
    "full_splice_float_cost",
    "full_splice_broadband_cost",
    "access_float_cost",
    "link_build_discount_15_cost",
    "link_build_broadband_discount_15_cost",
    "link_build_float_discount_15_cost",
    "splice_per_km_after_15_cost",
)


class ServiceCost(RowMixin, Base):
    """Client- and order-type-specific price sheet."""

    __tablename__ = "service_cost"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    client_id: Mapped[str] = mapped_column(ForeignKey("clients.id"), index=True, nullable=False)
    order_type: Mapped[str] = mapped_column(String(64), index=True, nullable=False)

    # drop cable
    survey_planning_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    callout_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    installation_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    per_meter_rate: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    discount: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    spon_budi_opti_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    splitter_install_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    mousepad_install_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    # link build
    full_splice_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    full_splice_float_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    full_splice_broadband_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    access_float_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    link_build_discount_15_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    link_build_broadband_discount_15_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    link_build_float_discount_15_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    splice_per_km_after_15_cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, nullable=False)

    def __repr__(self) -> str:
        return f"<ServiceCost client={self.client_id} order_type={self.order_type}>"
