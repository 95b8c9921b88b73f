"""Slitting job card CRUD

confirm_merge is the only place plant orders are consumed. The PENDING ->
COMPLETED update and the job card insert share one transaction; if another
confirmation got to any of the orders first, nothing is written.
"""

import logging
from datetime import date
from typing import List, Optional, Sequence

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import models, schemas
from ..core.conversion import meter_from_net_weight
from ..core.exceptions import StaleSelection
from ..core.plant_plan import Order, PlanResult
from ..models import JobStatus, OrderStatus
from ..utils.helpers import make_job_no

logger = logging.getLogger(__name__)


def _coils_from_plan(plan: PlanResult, rolls_override: Optional[int] = None) -> List[models.SlittingCoil]:
    return [
        models.SlittingCoil(
            number=c.coil_number,
            size=c.size,
            rolls=rolls_override if rolls_override is not None else c.rolls,
            target_qty=c.total_coil_weight,
            is_multi_up=c.is_multi_up,
        )
        for c in plan.coil_breakdown
    ]


def confirm_merge(db: Session, order_ids: Sequence[int], plan: PlanResult, job_date: Optional[date] = None):
    """Consume the selected orders and write the master job card.

    Raises StaleSelection when any order is no longer PENDING.
    """
    ids = list(order_ids)
    try:
        updated = (
            db.query(models.PlantOrder)
            .filter(models.PlantOrder.id.in_(ids), models.PlantOrder.status == OrderStatus.PENDING)
            .update({models.PlantOrder.status: OrderStatus.COMPLETED}, synchronize_session=False)
        )
        if updated != len(ids):
            db.rollback()
            pending = {
                o.id for o in db.query(models.PlantOrder.id)
                .filter(models.PlantOrder.id.in_(ids), models.PlantOrder.status == OrderStatus.PENDING)
            }
            raise StaleSelection(set(ids) - pending)

        orders = db.query(models.PlantOrder).filter(models.PlantOrder.id.in_(ids)).all()
        by_id = {o.id: o for o in orders}
        party_codes = list(dict.fromkeys(by_id[i].party_code for i in ids if i in by_id))

        job = models.SlittingJob(
            date=job_date or date.today(),
            job_no=make_job_no("MJ"),
            job_code=" / ".join(party_codes),
            micron=plan.micron,
            sizer=plan.sizer_width,
            roll_length=plan.roll_length,
            plan_qty=plan.combined_qty,
            status=JobStatus.PENDING,
            coils=_coils_from_plan(plan),
        )
        db.add(job)
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        logger.exception("failed to confirm merge for orders %s", ids)
        raise
    db.refresh(job)
    logger.info("job card %s created from orders %s", job.job_no, ids)
    return job


def create_direct_job(db: Session, job_in: schemas.DirectJobCreate, plan: PlanResult):
    """Master card entered directly; every coil runs the full master roll count."""
    job = models.SlittingJob(
        date=job_in.date or date.today(),
        job_no=make_job_no("M"),
        job_code=job_in.party_code,
        micron=job_in.micron,
        sizer=job_in.sizer,
        roll_length=plan.roll_length,
        plan_qty=job_in.qty,
        status=JobStatus.PENDING,
        coils=_coils_from_plan(plan, rolls_override=plan.total_rolls),
    )
    db.add(job)
    db.commit()
    db.refresh(job)
    return job


def get_job(db: Session, job_id: int):
    return db.query(models.SlittingJob).filter(models.SlittingJob.id == job_id).first()


def list_jobs(db: Session, status: Optional[str] = None, skip: int = 0, limit: int = 100):
    query = db.query(models.SlittingJob)
    if status:
        query = query.filter(models.SlittingJob.status == JobStatus(status))
    return query.order_by(models.SlittingJob.id.desc()).offset(skip).limit(limit).all()


def update_job_status(db: Session, job_id: int, status: JobStatus):
    job = get_job(db, job_id)
    if not job:
        return None
    job.status = status
    db.commit()
    db.refresh(job)
    return job


def delete_job(db: Session, job_id: int):
    job = get_job(db, job_id)
    if job:
        db.delete(job)
        db.commit()
        return True
    return False


def job_plan_orders(job: models.SlittingJob) -> List[Order]:
    """Rebuild plan orders from a stored card so its specs can be recomputed."""
    return [Order(size=c.size, quantity=c.target_qty or 0, micron=job.micron, is_multi_up=bool(c.is_multi_up))
            for c in job.coils]


def record_row(db: Session, job: models.SlittingJob, coil: models.SlittingCoil, row_in: schemas.SlittingRowCreate):
    """Save (or overwrite) a weighed roll; the job moves to IN_PROGRESS."""
    net_weight = max(0.0, row_in.gross_weight - row_in.core_weight)
    meter = meter_from_net_weight(net_weight, coil.size, job.micron) or 0

    row = (
        db.query(models.SlittingRow)
        .filter(models.SlittingRow.coil_id == coil.id, models.SlittingRow.sr_no == row_in.sr_no)
        .first()
    )
    if row is None:
        row = models.SlittingRow(job_id=job.id, coil_id=coil.id, sr_no=row_in.sr_no)
        db.add(row)
    row.gross_weight = row_in.gross_weight
    row.core_weight = row_in.core_weight
    row.net_weight = net_weight
    row.meter = meter
    job.status = JobStatus.IN_PROGRESS
    db.commit()
    db.refresh(row)
    return row


def delete_row(db: Session, job_id: int, row_id: int):
    row = (
        db.query(models.SlittingRow)
        .filter(models.SlittingRow.id == row_id, models.SlittingRow.job_id == job_id)
        .first()
    )
    if row:
        db.delete(row)
        db.commit()
        return True
    return False
