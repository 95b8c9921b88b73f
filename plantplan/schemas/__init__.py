"""API schemas

All Pydantic request / response models.
"""

from .plant_order import PlantOrderCreate, PlantOrderUpdate, PlantOrderRead
from .calculation import (
    SingleOrderRequest,
    SingleOrderResult,
    SingleOrderResponse,
    LabelOrderRequest,
    LabelOrderResponse,
    SlittingRowCalcRequest,
    SlittingRowCalcResponse,
    OrderIn,
    PlantPlanRequest,
    MultiUpRequest,
    CoilBreakdownSchema,
    PlanWarningSchema,
    SplitRunSchema,
    PlanResultSchema,
    PlanResponse,
)
from .slitting_job import (
    SlittingCoilRead,
    SlittingRowCreate,
    SlittingRowRead,
    SlittingJobRead,
    JobStatusUpdate,
    MergeRequest,
    MergeConfirm,
    MergePreviewResponse,
    DirectJobCreate,
)
from .production_plan import (
    ProductionPlanCreate,
    ProductionPlanUpdate,
    ProductionPlanRead,
)

__all__ = [
    "PlantOrderCreate",
    "PlantOrderUpdate",
    "PlantOrderRead",
    "SingleOrderRequest",
    "SingleOrderResult",
    "SingleOrderResponse",
    "LabelOrderRequest",
    "LabelOrderResponse",
    "SlittingRowCalcRequest",
    "SlittingRowCalcResponse",
    "OrderIn",
    "PlantPlanRequest",
    "MultiUpRequest",
    "CoilBreakdownSchema",
    "PlanWarningSchema",
    "SplitRunSchema",
    "PlanResultSchema",
    "PlanResponse",
    "SlittingCoilRead",
    "SlittingRowCreate",
    "SlittingRowRead",
    "SlittingJobRead",
    "JobStatusUpdate",
    "MergeRequest",
    "MergeConfirm",
    "MergePreviewResponse",
    "DirectJobCreate",
    "ProductionPlanCreate",
    "ProductionPlanUpdate",
    "ProductionPlanRead",
]
