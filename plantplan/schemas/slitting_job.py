"""Slitting job card and merge schemas"""

from pydantic import BaseModel, Field
from typing import List, Optional
from datetime import date as date_type, datetime

from ..models.slitting_job import JobStatus
from .calculation import PlanResultSchema


class SlittingCoilRead(BaseModel):
    id: int
    number: int
    size: float
    rolls: int
    target_qty: Optional[float] = None
    is_multi_up: bool = False

    class Config:
        from_attributes = True


class SlittingRowCreate(BaseModel):
    sr_no: int = Field(gt=0)
    gross_weight: float = Field(gt=0)
    core_weight: float = Field(ge=0)


class SlittingRowRead(BaseModel):
    id: int
    coil_id: int
    sr_no: int
    gross_weight: float
    core_weight: float
    net_weight: float
    meter: float

    class Config:
        from_attributes = True


class SlittingJobRead(BaseModel):
    id: int
    date: Optional[date_type] = None
    job_no: str
    job_code: str
    micron: float
    sizer: Optional[float] = None
    roll_length: float
    plan_qty: float
    status: JobStatus
    coils: List[SlittingCoilRead] = Field(default_factory=list)
    rows: List[SlittingRowRead] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class JobStatusUpdate(BaseModel):
    status: JobStatus


class MergeRequest(BaseModel):
    """Selected plant order ids (coil order follows this list) and preview edits"""
    order_ids: List[int] = Field(default_factory=list)
    sizer: Optional[float] = None
    roll_length: Optional[float] = None
    multi_up: bool = False


class MergeConfirm(MergeRequest):
    date: Optional[date_type] = None


class MergePreviewResponse(BaseModel):
    order_ids: List[int]
    micron: float
    result: Optional[PlanResultSchema] = None


class DirectJobCreate(BaseModel):
    """Master card built straight from a total qty split evenly over coil widths"""
    party_code: str
    date: Optional[date_type] = None
    micron: float = Field(gt=0)
    qty: float = Field(gt=0)
    sizer: float = Field(gt=0)
    roll_length: Optional[float] = None
    coil_sizes: List[float] = Field(min_length=1)
