# fieldops/models/_base.py
import uuid
from datetime import datetime, timezone
from typing import Any, Dict


def new_uuid() -> str:
    return str(uuid.uuid4())


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class RowMixin:
    """Plain-dict view of a row, keyed by column name."""

    def to_dict(self) -> Dict[str, Any]:
        return {c.name: getattr(self, c.key) for c in self.__table__.columns}
