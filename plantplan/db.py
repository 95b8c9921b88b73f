"""
Database entry point

Re-exports the pieces of plantplan.database.connection used across the app.
"""

from .database.connection import engine, get_db, Base, SessionLocal

__all__ = ["engine", "get_db", "Base", "SessionLocal"]
