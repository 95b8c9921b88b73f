"""Database models

All SQLAlchemy ORM models.
"""

from ..database.connection import Base
from .plant_order import PlantOrder, OrderStatus
from .slitting_job import SlittingJob, SlittingCoil, SlittingRow, JobStatus
from .production_plan import ProductionPlan

__all__ = [
    "Base",
    "PlantOrder",
    "OrderStatus",
    "SlittingJob",
    "SlittingCoil",
    "SlittingRow",
    "JobStatus",
    "ProductionPlan",
]
