"""FastAPI application entry point

REST API for the plant planner:
- calculations: stateless weight / meter / roll formulas
- plant orders: the PENDING queue fed to merges
- merges: preview and confirm multi-order slitting runs
- slitting jobs: confirmed job cards and the rolls weighed against them
- production plans: printing / cutting jobs
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from .api.v1 import (
    calculations_router,
    plant_orders_router,
    merges_router,
    slitting_jobs_router,
    production_plans_router,
)
from .config.settings import settings
from .core.exceptions import (
    EmptySelection,
    IncompletePlan,
    InvalidTransition,
    MicronMismatch,
    PlanningError,
    StaleSelection,
)

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.APP_TITLE, description=settings.APP_DESCRIPTION, version=settings.APP_VERSION)

app.include_router(calculations_router, prefix="/api/v1")
app.include_router(plant_orders_router, prefix="/api/v1")
app.include_router(merges_router, prefix="/api/v1")
app.include_router(slitting_jobs_router, prefix="/api/v1")
app.include_router(production_plans_router, prefix="/api/v1")

# rejections the operator acknowledges before retrying
_STATUS_CODES = {
    MicronMismatch: 422,
    EmptySelection: 422,
    IncompletePlan: 422,
    StaleSelection: 409,
    InvalidTransition: 409,
}


@app.exception_handler(PlanningError)
async def planning_error_handler(request: Request, exc: PlanningError):
    status_code = next((code for cls, code in _STATUS_CODES.items() if isinstance(exc, cls)), 400)
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    content = {"detail": str(exc), "error": type(exc).__name__}
    if isinstance(exc, StaleSelection):
        content["order_ids"] = exc.order_ids
    return JSONResponse(status_code=status_code, content=content)


@app.get("/")
def root():
    return {"name": settings.APP_TITLE, "version": settings.APP_VERSION}
