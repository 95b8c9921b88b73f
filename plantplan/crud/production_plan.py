"""Printing / cutting plan CRUD

Weight, meter and pcs are never stored as typed: the field the operator
edited is run through the single order calculator and all three are saved
from its result.
"""

from sqlalchemy import case
from sqlalchemy.orm import Session
from typing import Optional

from .. import models, schemas
from ..core.single_order import EditedField, EditedValue, SingleOrderResult, calculate_single_order
from ..models import OrderStatus
from ..utils.helpers import parse_size

_EDITED_ATTR = {
    EditedField.weight: "weight",
    EditedField.meter: "meter",
    EditedField.pieces: "pcs",
}


def calculate_plan_fields(size: str, micron: float, cutting_size: float, job_type: str,
                          edited_field: EditedField, value: Optional[float]) -> Optional[SingleOrderResult]:
    return calculate_single_order(
        parse_size(size),
        micron,
        cutting_size or 0,
        job_type,
        EditedValue(field=edited_field, value=value or 0),
    )


def create_production_plan(db: Session, plan: schemas.ProductionPlanCreate):
    """Returns None when the plan is incomplete (size, micron or the edited value missing)."""
    value = getattr(plan, _EDITED_ATTR[plan.edited_field])
    if not value or value <= 0:
        return None
    result = calculate_plan_fields(plan.size, plan.micron, plan.cutting_size, plan.type, plan.edited_field, value)
    if result is None:
        return None

    db_plan = models.ProductionPlan(
        date=plan.date,
        party_name=plan.party_name,
        size=plan.size,
        type=plan.type,
        print_name=plan.print_name if plan.type == "Printing" else "",
        weight=result.weight,
        micron=plan.micron,
        meter=result.meter,
        cutting_size=plan.cutting_size or 0,
        pcs=result.pieces,
        notes=plan.notes,
        status=OrderStatus.PENDING,
    )
    db.add(db_plan)
    db.commit()
    db.refresh(db_plan)
    return db_plan


def get_production_plan(db: Session, plan_id: int):
    return db.query(models.ProductionPlan).filter(models.ProductionPlan.id == plan_id).first()


def list_production_plans(db: Session, skip: int = 0, limit: int = 100):
    """Pending first, newest first."""
    pending_first = case((models.ProductionPlan.status == OrderStatus.PENDING, 0), else_=1)
    return (
        db.query(models.ProductionPlan)
        .order_by(pending_first, models.ProductionPlan.created_at.desc(), models.ProductionPlan.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_production_plan(db: Session, plan_id: int, plan_update: schemas.ProductionPlanUpdate):
    db_plan = get_production_plan(db, plan_id)
    if not db_plan:
        return None

    update_data = plan_update.model_dump(exclude_unset=True)
    edited_field = update_data.pop("edited_field", None)
    for field, value in update_data.items():
        setattr(db_plan, field, value)

    if edited_field is None:
        # the value sent is the one the operator edited
        edited_field = next((f for f, attr in _EDITED_ATTR.items() if attr in update_data), None)
    if edited_field is not None or {"size", "micron", "cutting_size", "type"} & update_data.keys():
        edited_field = EditedField(edited_field or EditedField.weight)
        value = getattr(db_plan, _EDITED_ATTR[edited_field])
        result = calculate_plan_fields(db_plan.size, db_plan.micron, db_plan.cutting_size, db_plan.type,
                                       edited_field, value)
        if result is not None:
            db_plan.weight = result.weight
            db_plan.meter = result.meter
            db_plan.pcs = result.pieces
    if db_plan.type != "Printing":
        db_plan.print_name = ""

    db.commit()
    db.refresh(db_plan)
    return db_plan


def delete_production_plan(db: Session, plan_id: int):
    db_plan = get_production_plan(db, plan_id)
    if db_plan:
        db.delete(db_plan)
        db.commit()
        return True
    return False
