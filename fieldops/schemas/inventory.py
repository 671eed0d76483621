# fieldops/schemas/inventory.py
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

RequestStatus = Literal["pending", "approved", "rejected"]

NOT_NULL_FIELDS = ("item_name", "quantity")


class InventoryFields(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    item_name: Optional[str] = Field(None, min_length=1, max_length=200)
    item_code: Optional[str] = Field(None, max_length=100)
    description: Optional[str] = None
    category: Optional[str] = Field(None, max_length=100)
    quantity: Optional[int] = Field(None, ge=0)
    unit: Optional[str] = Field(None, max_length=32)
    minimum_quantity: Optional[int] = Field(None, ge=0)
    reorder_level: Optional[int] = Field(None, ge=0)
    supplier_name: Optional[str] = Field(None, max_length=200)
    supplier_contact: Optional[str] = Field(None, max_length=200)
    location: Optional[str] = Field(None, max_length=200)
    cost_price: Optional[float] = Field(None, ge=0)
    selling_price: Optional[float] = Field(None, ge=0)

    @field_validator(*NOT_NULL_FIELDS, mode="before")
    @classmethod
    def _not_null(cls, v):
        if v is None:
            raise ValueError("must not be null")
        return v


class InventoryCreate(InventoryFields):
    item_name: str = Field(..., min_length=1, max_length=200)


class InventoryUpdate(InventoryFields):
    @model_validator(mode="after")
    def _at_least_one_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class UsageItem(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    inventory_id: str = Field(..., min_length=1)
    quantity: int = Field(..., gt=0)
    item_name: Optional[str] = None
    unit: Optional[str] = None


class InventoryUsage(BaseModel):
    """Stock booked on one job; ``job_type`` is ``drop_cable`` or ``link_build``."""

    model_config = ConfigDict(str_strip_whitespace=True)

    job_type: str = Field(..., min_length=1)
    job_id: str = Field(..., min_length=1)
    items: List[UsageItem] = Field(..., min_length=1)


class InventoryRequestCreate(InventoryUsage):
    pass


class InventoryRequestReject(BaseModel):
    reason: Optional[str] = Field(None, max_length=500)
