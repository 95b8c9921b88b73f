"""Calculation request / response schemas

Numeric inputs are not range-checked here: zero or missing values are
"not filled in yet" and come back as ``result: null`` instead of a 422.
"""

from pydantic import BaseModel, Field
from typing import List, Literal, Optional

from ..core.single_order import EditedField


class SingleOrderRequest(BaseModel):
    size: Optional[float] = None
    micron: Optional[float] = None
    cutting_size: float = 0
    job_type: str = "Printing"
    edited_field: EditedField = EditedField.weight
    value: Optional[float] = None


class SingleOrderResult(BaseModel):
    weight: float
    meter: float
    pieces: int
    allowance: float
    extra_meter: float


class SingleOrderResponse(BaseModel):
    result: Optional[SingleOrderResult] = None


class LabelOrderRequest(BaseModel):
    size: Optional[float] = None
    micron: Optional[float] = None
    edited_field: Literal["qty", "meter"] = "qty"
    value: Optional[float] = None


class LabelOrderResponse(BaseModel):
    qty: Optional[float] = None
    meter: Optional[float] = None


class SlittingRowCalcRequest(BaseModel):
    net_weight: Optional[float] = None
    size: Optional[float] = None
    micron: Optional[float] = None


class SlittingRowCalcResponse(BaseModel):
    meter: Optional[int] = None


class OrderIn(BaseModel):
    size: Optional[float] = None
    quantity: Optional[float] = None
    micron: Optional[float] = None


class PlantPlanRequest(BaseModel):
    orders: List[OrderIn] = Field(default_factory=list)
    micron: Optional[float] = None
    # defaults to the sum of order widths
    sizer_width: Optional[float] = None
    roll_length: Optional[float] = None


class MultiUpRequest(BaseModel):
    orders: List[OrderIn] = Field(default_factory=list)
    micron: Optional[float] = None
    roll_length: Optional[float] = None
    multi_up_enabled: bool = False
    sizer_override: Optional[float] = None


class CoilBreakdownSchema(BaseModel):
    coil_number: int
    size: float
    unit_roll_weight: float
    total_coil_weight: float
    rolls: int
    meters_required: float
    is_multi_up: bool = False
    order_id: Optional[int] = None


class PlanWarningSchema(BaseModel):
    code: str
    message: str
    coil_number: Optional[int] = None
    field: Optional[str] = None


class SplitRunSchema(BaseModel):
    phase1_meters: float
    phase2_meters: float
    phase2_coils: List[int] = Field(default_factory=list)


class PlanResultSchema(BaseModel):
    micron: float
    sizer_width: float
    roll_length: float
    slitting_size: float
    combined_qty: float
    tube_1mtr_weight: float
    tube_roll_length: float
    jumbo_roll_weight: float
    production_qty: float
    total_rolls: int
    coil_breakdown: List[CoilBreakdownSchema]
    max_meters_required: float
    min_meters_required: float
    needs_split_run: bool
    multi_up: bool = False
    split_run: Optional[SplitRunSchema] = None
    warnings: List[PlanWarningSchema] = Field(default_factory=list)


class PlanResponse(BaseModel):
    result: Optional[PlanResultSchema] = None
