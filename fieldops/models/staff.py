# fieldops/models/staff.py
from __future__ import annotations

from typing import Optional

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from fieldops.db import Base
from fieldops.models._base import RowMixin, new_uuid


class Staff(RowMixin, Base):
    """Only what the mobile views need to map an auth user to a technician."""

    __tablename__ = "staff"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=new_uuid)
    auth_user_id: Mapped[Optional[str]] = mapped_column(String(36), unique=True, index=True, nullable=True)
    first_name: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    surname: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)
    email: Mapped[Optional[str]] = mapped_column(String(320), nullable=True)
    role: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
