#!/usr/bin/env python3
"""Seed sample plant orders and a production plan for local testing.

Runnable directly (python scripts/seed_plant.py). If you see
`ModuleNotFoundError: No module named 'plantplan'`, run from the project root
or set PYTHONPATH=. before running.
"""
import argparse
import logging
import sys
from datetime import date
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.exc import SQLAlchemyError

from plantplan import crud, schemas
from plantplan.db import SessionLocal, Base, engine

logger = logging.getLogger("seed_plant")

SAMPLE_ORDERS = [
    ("ACME", 250, 40, 300),
    ("BETA", 350, 40, 300),
    ("GAMMA", 300, 45, 220),
    ("DELTA", 180, 45, 150),
]


def main():
    parser = argparse.ArgumentParser(description='Seed sample plant orders and a printing plan.')
    parser.add_argument('--no-orders', action='store_true', help='Skip seeding plant orders')
    parser.add_argument('--no-plans', action='store_true', help='Skip seeding the production plan')
    parser.add_argument('--create-tables', action='store_true', help='Create tables before seeding (sqlite dev only)')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    try:
        with SessionLocal() as db:
            if not args.no_orders:
                if crud.list_plant_orders(db, status="PENDING"):
                    logger.info("pending plant orders already present, skipping")
                else:
                    for party_code, size, micron, qty in SAMPLE_ORDERS:
                        order = crud.create_plant_order(db, schemas.PlantOrderCreate(
                            date=date.today(), party_code=party_code, size=size, micron=micron, qty=qty,
                        ))
                        logger.info("plant order %s: %s %gmm x %gu, %gkg", order.id, party_code, size, micron, qty)

            if not args.no_plans:
                if crud.list_production_plans(db, limit=1):
                    logger.info("production plans already present, skipping")
                else:
                    plan = crud.create_production_plan(db, schemas.ProductionPlanCreate(
                        date=date.today(), party_name="ACME", size="300", type="Printing",
                        print_name="Rose", micron=50, cutting_size=400, weight=50,
                    ))
                    logger.info("production plan %s: %s m, %s pcs", plan.id, plan.meter, plan.pcs)
    except SQLAlchemyError:
        logger.exception("seeding failed")
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
