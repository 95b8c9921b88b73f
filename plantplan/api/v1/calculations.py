"""Calculation API routes

Stateless wrappers over plantplan.core. Incomplete input answers 200 with a
null result so forms can call these on every keystroke.
"""

from fastapi import APIRouter

from ... import schemas
from ...config.settings import settings
from ...core import conversion
from ...core.multi_up import optimize_multi_up
from ...core.plant_plan import Order, calculate_plant_plan
from ...core.single_order import EditedValue, calculate_single_order

router = APIRouter(prefix="/calculations", tags=["calculations"])


def _orders(items):
    return [Order(size=o.size, quantity=o.quantity, micron=o.micron) for o in items]


@router.post("/single-order", response_model=schemas.SingleOrderResponse)
def single_order(req: schemas.SingleOrderRequest):
    """Printing / cutting job: weight, meter and pieces from the last edited field"""
    result = calculate_single_order(
        req.size,
        req.micron,
        req.cutting_size,
        req.job_type,
        EditedValue(field=req.edited_field, value=req.value or 0),
    )
    return {"result": result.to_dict() if result else None}


@router.post("/label-order", response_model=schemas.LabelOrderResponse)
def label_order(req: schemas.LabelOrderRequest):
    """Label entry: qty <-> meter"""
    if req.edited_field == "qty":
        return {"qty": req.value, "meter": conversion.label_meter_for_qty(req.size, req.micron, req.value)}
    return {"qty": conversion.label_qty_for_meter(req.size, req.micron, req.value), "meter": req.value}


@router.post("/slitting-row", response_model=schemas.SlittingRowCalcResponse)
def slitting_row(req: schemas.SlittingRowCalcRequest):
    """Roll length estimate from weighed net weight"""
    return {"meter": conversion.meter_from_net_weight(req.net_weight, req.size, req.micron)}


@router.post("/plant-plan", response_model=schemas.PlanResponse)
def plant_plan(req: schemas.PlantPlanRequest):
    orders = _orders(req.orders)
    sizer = req.sizer_width or sum(o.size for o in orders if o.size)
    plan = calculate_plant_plan(orders, req.micron, sizer, req.roll_length, settings.SPLIT_RUN_THRESHOLD_M)
    return {"result": plan.to_dict() if plan else None}


@router.post("/multi-up", response_model=schemas.PlanResponse)
def multi_up(req: schemas.MultiUpRequest):
    """Merged run with optional re-slit; 422 when order microns differ"""
    plan = optimize_multi_up(
        _orders(req.orders),
        req.micron,
        req.roll_length or settings.DEFAULT_ROLL_LENGTH,
        req.multi_up_enabled,
        sizer_override=req.sizer_override,
        split_threshold=settings.SPLIT_RUN_THRESHOLD_M,
    )
    return {"result": plan.to_dict() if plan else None}
