"""Plant order CRUD

The plant queue: orders stay PENDING until a confirmed job card consumes them.
"""

from sqlalchemy import String, case, cast, or_
from sqlalchemy.orm import Session
from typing import List, Optional, Sequence

from .. import models, schemas
from ..core.conversion import label_meter_for_qty
from ..core.plant_plan import Order
from ..models import OrderStatus


def create_plant_order(db: Session, order: schemas.PlantOrderCreate):
    meter = order.meter
    if not meter:
        meter = label_meter_for_qty(order.size, order.micron, order.qty)

    db_order = models.PlantOrder(
        date=order.date,
        party_code=order.party_code,
        sizer=order.sizer or "LABEL",
        size=order.size,
        micron=order.micron,
        qty=order.qty,
        meter=meter,
        status=OrderStatus.PENDING,
    )
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order


def get_plant_order(db: Session, order_id: int):
    return db.query(models.PlantOrder).filter(models.PlantOrder.id == order_id).first()


def get_plant_orders_by_ids(db: Session, order_ids: Sequence[int]) -> List[models.PlantOrder]:
    """Fetch orders keeping the caller's ordering (it becomes the coil numbering)."""
    if not order_ids:
        return []
    found = db.query(models.PlantOrder).filter(models.PlantOrder.id.in_(list(order_ids))).all()
    by_id = {o.id: o for o in found}
    return [by_id[i] for i in order_ids if i in by_id]


def list_plant_orders(db: Session, status: Optional[str] = None, search: Optional[str] = None,
                      skip: int = 0, limit: int = 100):
    """Pending first, then newest date first."""
    query = db.query(models.PlantOrder)
    if status:
        query = query.filter(models.PlantOrder.status == OrderStatus(status))
    if search:
        like = f"%{search}%"
        query = query.filter(or_(models.PlantOrder.party_code.ilike(like),
                                 cast(models.PlantOrder.size, String).ilike(like)))
    pending_first = case((models.PlantOrder.status == OrderStatus.PENDING, 0), else_=1)
    return (
        query.order_by(pending_first, models.PlantOrder.date.desc(), models.PlantOrder.id.desc())
        .offset(skip)
        .limit(limit)
        .all()
    )


def update_plant_order(db: Session, order_id: int, order_update: schemas.PlantOrderUpdate):
    db_order = get_plant_order(db, order_id)
    if not db_order:
        return None

    update_data = order_update.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_order, field, value)
    # meter follows qty unless the caller set it explicitly
    if "meter" not in update_data and {"qty", "size", "micron"} & update_data.keys():
        db_order.meter = label_meter_for_qty(db_order.size, db_order.micron, db_order.qty)

    db.commit()
    db.refresh(db_order)
    return db_order


def delete_plant_order(db: Session, order_id: int):
    db_order = get_plant_order(db, order_id)
    if db_order:
        db.delete(db_order)
        db.commit()
        return True
    return False


def to_plan_order(db_order: models.PlantOrder) -> Order:
    return Order(size=db_order.size, quantity=db_order.qty, micron=db_order.micron, order_id=db_order.id)
