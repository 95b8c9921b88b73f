"""Merge API routes

The HTTP surface is stateless, so every request replays the workflow on a
fresh MergeSession: select the ids, preview, apply the edits, and (for
confirm) commit. Selected orders must exist and still be PENDING.
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from ... import crud, schemas
from ...config.settings import settings
from ...core.merge import MergeSession
from ...database.connection import get_db
from ...models import OrderStatus

router = APIRouter(prefix="/merges", tags=["merges"])


def _order_ids(req: schemas.MergeRequest):
    return list(dict.fromkeys(req.order_ids))


def _open_session(req: schemas.MergeRequest, db: Session) -> MergeSession:
    order_ids = _order_ids(req)
    db_orders = crud.get_plant_orders_by_ids(db, order_ids)
    found = {o.id for o in db_orders}
    missing = [i for i in order_ids if i not in found]
    if missing:
        raise HTTPException(status_code=404, detail=f"Plant orders not found: {missing}")

    session = MergeSession(default_roll_length=settings.DEFAULT_ROLL_LENGTH,
                           split_threshold=settings.SPLIT_RUN_THRESHOLD_M)
    for order_id in order_ids:
        session.select(order_id)
    # consumed orders drop out, so preview reports them as stale
    pending = [crud.to_plan_order(o) for o in db_orders if o.status == OrderStatus.PENDING]
    session.preview(pending)
    session.update_preview(sizer=req.sizer, roll_length=req.roll_length, multi_up=req.multi_up)
    return session


@router.post("/preview", response_model=schemas.MergePreviewResponse)
def preview_merge(req: schemas.MergeRequest, db: Session = Depends(get_db)):
    session = _open_session(req, db)
    return {
        "order_ids": _order_ids(req),
        "micron": session.micron,
        "result": session.plan.to_dict() if session.plan else None,
    }


@router.post("/confirm", response_model=schemas.SlittingJobRead)
def confirm_merge(req: schemas.MergeConfirm, db: Session = Depends(get_db)):
    """Create the master job card and mark the orders COMPLETED"""
    session = _open_session(req, db)
    return session.confirm(lambda ids, plan: crud.confirm_merge(db, _order_ids(req), plan, req.date))

