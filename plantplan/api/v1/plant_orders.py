"""Plant order API routes"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from typing import List, Optional

from ... import crud, schemas
from ...database.connection import get_db

router = APIRouter(prefix="/plant-orders", tags=["plant-orders"])


@router.post("/", response_model=schemas.PlantOrderRead)
def create_plant_order(order: schemas.PlantOrderCreate, db: Session = Depends(get_db)):
    """Queue a new plant order (PENDING)"""
    return crud.create_plant_order(db, order)


@router.get("/", response_model=List[schemas.PlantOrderRead])
def read_plant_orders(status: Optional[str] = None, search: Optional[str] = None,
                      skip: int = 0, limit: int = 100, db: Session = Depends(get_db)):
    if status and status not in ("PENDING", "COMPLETED"):
        raise HTTPException(status_code=422, detail=f"Unknown status {status}")
    return crud.list_plant_orders(db, status=status, search=search, skip=skip, limit=limit)


@router.get("/{order_id}", response_model=schemas.PlantOrderRead)
def read_plant_order(order_id: int, db: Session = Depends(get_db)):
    db_order = crud.get_plant_order(db, order_id)
    if not db_order:
        raise HTTPException(status_code=404, detail="Plant order not found")
    return db_order


@router.put("/{order_id}", response_model=schemas.PlantOrderRead)
def update_plant_order(order_id: int, order_update: schemas.PlantOrderUpdate, db: Session = Depends(get_db)):
    db_order = crud.update_plant_order(db, order_id, order_update)
    if not db_order:
        raise HTTPException(status_code=404, detail="Plant order not found")
    return db_order


@router.delete("/{order_id}")
def delete_plant_order(order_id: int, db: Session = Depends(get_db)):
    success = crud.delete_plant_order(db, order_id)
    if not success:
        raise HTTPException(status_code=404, detail="Plant order not found")
    return {"message": "Plant order deleted successfully"}
