"""Slitting job card API routes"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from ... import crud, schemas
from ...config.settings import settings
from ...core.plant_plan import Order, calculate_plant_plan
from ...database.connection import get_db

router = APIRouter(prefix="/slitting-jobs", tags=["slitting-jobs"])


def _get_job_or_404(db: Session, job_id: int):
    job = crud.get_job(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Slitting job not found")
    return job


@router.post("/direct", response_model=schemas.SlittingJobRead)
def create_direct_job(job_in: schemas.DirectJobCreate, db: Session = Depends(get_db)):
    """Master card typed in directly: total qty is split evenly over the coils"""
    share = job_in.qty / len(job_in.coil_sizes)
    orders = [Order(size=size, quantity=share, micron=job_in.micron) for size in job_in.coil_sizes]
    plan = calculate_plant_plan(
        orders,
        job_in.micron,
        job_in.sizer,
        job_in.roll_length or settings.DEFAULT_ROLL_LENGTH,
        settings.SPLIT_RUN_THRESHOLD_M,
    )
    if plan is None:
        raise HTTPException(status_code=422, detail="Complete all Master Job details")
    return crud.create_direct_job(db, job_in, plan)


@router.get("/", response_model=List[schemas.SlittingJobRead])
def read_jobs(status: Optional[str] = None, skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    if status and status not in ("PENDING", "IN_PROGRESS", "COMPLETED"):
        raise HTTPException(status_code=422, detail=f"Unknown status {status}")
    return crud.list_jobs(db, status=status, skip=skip, limit=limit)


@router.get("/{job_id}", response_model=schemas.SlittingJobRead)
def read_job(job_id: int, db: Session = Depends(get_db)):
    return _get_job_or_404(db, job_id)


@router.get("/{job_id}/specs", response_model=schemas.PlanResponse)
def read_job_specs(job_id: int, db: Session = Depends(get_db)):
    """Recompute the production card from the stored coils"""
    job = _get_job_or_404(db, job_id)
    orders = crud.job_plan_orders(job)
    sizer = job.sizer or sum(o.size for o in orders)
    plan = calculate_plant_plan(orders, job.micron, sizer, job.roll_length, settings.SPLIT_RUN_THRESHOLD_M)
    return {"result": plan.to_dict() if plan else None}


@router.put("/{job_id}/status", response_model=schemas.SlittingJobRead)
def update_job_status(job_id: int, update: schemas.JobStatusUpdate, db: Session = Depends(get_db)):
    job = crud.update_job_status(db, job_id, update.status)
    if not job:
        raise HTTPException(status_code=404, detail="Slitting job not found")
    return job


@router.delete("/{job_id}")
def delete_job(job_id: int, db: Session = Depends(get_db)):
    if not crud.delete_job(db, job_id):
        raise HTTPException(status_code=404, detail="Slitting job not found")
    return {"message": "Job card deleted successfully"}


@router.post("/{job_id}/coils/{coil_id}/rows", response_model=schemas.SlittingRowRead)
def record_row(job_id: int, coil_id: int, row_in: schemas.SlittingRowCreate, db: Session = Depends(get_db)):
    """Record a weighed roll; meter is estimated from the net weight"""
    job = _get_job_or_404(db, job_id)
    coil = next((c for c in job.coils if c.id == coil_id), None)
    if coil is None:
        raise HTTPException(status_code=404, detail="Coil not found on this job")
    return crud.record_row(db, job, coil, row_in)


@router.delete("/{job_id}/rows/{row_id}")
def delete_row(job_id: int, row_id: int, db: Session = Depends(get_db)):
    if not crud.delete_row(db, job_id, row_id):
        raise HTTPException(status_code=404, detail="Row not found")
    return {"message": "Row deleted successfully"}
