"""Printing / cutting plan API routes"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List

from ... import crud, schemas
from ...database.connection import get_db

router = APIRouter(prefix="/production-plans", tags=["production-plans"])


@router.post("/", response_model=schemas.ProductionPlanRead)
def create_production_plan(plan: schemas.ProductionPlanCreate, db: Session = Depends(get_db)):
    db_plan = crud.create_production_plan(db, plan)
    if db_plan is None:
        raise HTTPException(status_code=422, detail="Please fill Party, Size and Weight")
    return db_plan


@router.get("/", response_model=List[schemas.ProductionPlanRead])
def read_production_plans(skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    return crud.list_production_plans(db, skip=skip, limit=limit)


@router.get("/{plan_id}", response_model=schemas.ProductionPlanRead)
def read_production_plan(plan_id: int, db: Session = Depends(get_db)):
    db_plan = crud.get_production_plan(db, plan_id)
    if not db_plan:
        raise HTTPException(status_code=404, detail="Production plan not found")
    return db_plan


@router.put("/{plan_id}", response_model=schemas.ProductionPlanRead)
def update_production_plan(plan_id: int, plan_update: schemas.ProductionPlanUpdate, db: Session = Depends(get_db)):
    db_plan = crud.update_production_plan(db, plan_id, plan_update)
    if not db_plan:
        raise HTTPException(status_code=404, detail="Production plan not found")
    return db_plan


@router.delete("/{plan_id}")
def delete_production_plan(plan_id: int, db: Session = Depends(get_db)):
    if not crud.delete_production_plan(db, plan_id):
        raise HTTPException(status_code=404, detail="Production plan not found")
    return {"message": "Production plan deleted successfully"}
