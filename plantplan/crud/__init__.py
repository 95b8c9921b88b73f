from .plant_order import (
    create_plant_order,
    get_plant_order,
    get_plant_orders_by_ids,
    list_plant_orders,
    update_plant_order,
    delete_plant_order,
    to_plan_order,
)

from .slitting_job import (
    confirm_merge,
    create_direct_job,
    get_job,
    list_jobs,
    update_job_status,
    delete_job,
    job_plan_orders,
    record_row,
    delete_row,
)

from .production_plan import (
    create_production_plan,
    get_production_plan,
    list_production_plans,
    update_production_plan,
    delete_production_plan,
)

__all__ = [
    # Plant order functions
    "create_plant_order",
    "get_plant_order",
    "get_plant_orders_by_ids",
    "list_plant_orders",
    "update_plant_order",
    "delete_plant_order",
    "to_plan_order",

    # Slitting job functions
    "confirm_merge",
    "create_direct_job",
    "get_job",
    "list_jobs",
    "update_job_status",
    "delete_job",
    "job_plan_orders",
    "record_row",
    "delete_row",

    # Production plan functions
    "create_production_plan",
    "get_production_plan",
    "list_production_plans",
    "update_production_plan",
    "delete_production_plan",
]
