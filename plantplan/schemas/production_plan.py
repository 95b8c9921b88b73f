"""Printing / cutting plan schemas"""

from pydantic import BaseModel, Field, model_validator
from typing import Optional
from datetime import date as date_type, datetime

from ..core.single_order import EditedField
from ..models.plant_order import OrderStatus


class ProductionPlanBase(BaseModel):
    date: Optional[date_type] = None
    party_name: str
    size: str
    type: str = "Printing"
    print_name: Optional[str] = None
    micron: float = Field(gt=0)
    cutting_size: float = 0
    notes: Optional[str] = None


class ProductionPlanCreate(ProductionPlanBase):
    """Weight, meter and pcs are recomputed from whichever was edited last"""
    weight: Optional[float] = None
    meter: Optional[float] = None
    pcs: Optional[int] = None
    edited_field: EditedField = EditedField.weight


class ProductionPlanUpdate(BaseModel):
    date: Optional[date_type] = None
    party_name: Optional[str] = None
    size: Optional[str] = None
    type: Optional[str] = None
    print_name: Optional[str] = None
    micron: Optional[float] = Field(default=None, gt=0)
    cutting_size: Optional[float] = None
    notes: Optional[str] = None
    weight: Optional[float] = None
    meter: Optional[float] = None
    pcs: Optional[int] = None
    edited_field: Optional[EditedField] = None
    status: Optional[OrderStatus] = None

    @model_validator(mode="after")
    def one_edited_value(self):
        """Without edited_field, at most one of weight, meter and pcs may change"""
        if self.edited_field is None and len({"weight", "meter", "pcs"} & self.model_fields_set) > 1:
            raise ValueError("Send edited_field when changing more than one of weight, meter and pcs")
        return self


class ProductionPlanRead(ProductionPlanBase):
    id: int
    weight: float
    meter: float
    pcs: int
    status: OrderStatus
    label: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
