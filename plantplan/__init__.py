"""Plant planner

Slitting and plant production planning for a film converting plant.
"""

from . import (
    config,
    core,
    crud,
    db,
    models,
    schemas,
)

from .config.settings import settings
from .db import get_db, engine, Base

__all__ = [
    "config",
    "core",
    "crud",
    "db",
    "models",
    "schemas",
    "settings",
    "get_db",
    "engine",
    "Base",
]
