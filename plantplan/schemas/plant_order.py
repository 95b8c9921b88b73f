"""Plant order schemas"""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import date as date_type, datetime

from ..models.plant_order import OrderStatus


class PlantOrderBase(BaseModel):
    """Plant order base fields"""
    date: Optional[date_type] = None
    party_code: str
    sizer: Optional[str] = None
    size: float = Field(gt=0)  # slit width (mm)
    micron: float = Field(gt=0)
    qty: float = Field(gt=0)  # target weight (kg)
    meter: Optional[float] = None


class PlantOrderCreate(PlantOrderBase):
    """Meter is derived from qty (label factor) when not given"""
    pass


class PlantOrderUpdate(BaseModel):
    date: Optional[date_type] = None
    party_code: Optional[str] = None
    sizer: Optional[str] = None
    size: Optional[float] = Field(default=None, gt=0)
    micron: Optional[float] = Field(default=None, gt=0)
    qty: Optional[float] = Field(default=None, gt=0)
    meter: Optional[float] = None


class PlantOrderRead(PlantOrderBase):
    id: int
    status: OrderStatus
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True
