from typing import Any, Optional
from uuid import UUID

from pydantic import BaseModel, Field, field_validator


class WeeklyTotalsRequest(BaseModel):
    client_id: UUID
    order_type: Optional[str] = None
    week: str = Field(..., description="YYYY-WW, YYYY/W or a bare week number")

    @field_validator("week", mode="before")
    @classmethod
    def _week_as_string(cls, v: Any) -> Any:
        # frontend stuurt soms een getal
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v
