from .calculations import router as calculations_router
from .plant_orders import router as plant_orders_router
from .merges import router as merges_router
from .slitting_jobs import router as slitting_jobs_router
from .production_plans import router as production_plans_router

__all__ = [
    "calculations_router",
    "plant_orders_router",
    "merges_router",
    "slitting_jobs_router",
    "production_plans_router",
]
