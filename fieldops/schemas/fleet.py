# fieldops/schemas/fleet.py
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class VehicleFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    registration: Optional[str] = Field(None, min_length=1, max_length=20)
    make: Optional[str] = Field(None, max_length=100)
    model: Optional[str] = Field(None, max_length=100)
    vin: Optional[str] = Field(None, max_length=50)
    vehicle_type: Optional[str] = Field(None, max_length=100)
    technician: Optional[str] = Field(None, max_length=200)
    technician_id: Optional[UUID] = None

    @field_validator("registration", mode="before")
    @classmethod
    def _registration_not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class VehicleCreate(VehicleFields):
    registration: str = Field(..., min_length=1, max_length=20)


class VehicleUpdate(VehicleFields):
    @model_validator(mode="after")
    def _at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self
