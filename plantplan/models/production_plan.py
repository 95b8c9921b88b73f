"""Printing / cutting production plan model"""

from sqlalchemy import Column, Integer, String, DateTime, Float, Date, Enum, Text
from sqlalchemy.sql import func
from ..database.connection import Base
from ..utils.helpers import display_size
from .plant_order import OrderStatus


class ProductionPlan(Base):
    __tablename__ = "production_plans"
    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=True)
    party_name = Column(String(255), nullable=False)
    size = Column(String(64), nullable=False)
    # one of core.single_order.JOB_TYPES
    type = Column(String(64), nullable=False)
    print_name = Column(String(255), nullable=True)
    weight = Column(Float, nullable=False)
    micron = Column(Float, nullable=False)
    meter = Column(Float, nullable=False, default=0)
    cutting_size = Column(Float, nullable=False, default=0)
    pcs = Column(Integer, nullable=False, default=0)
    notes = Column(Text, nullable=True)
    status = Column(Enum(OrderStatus), nullable=False, default=OrderStatus.PENDING)
    created_at = Column(DateTime, server_default=func.now())

    @property
    def label(self) -> str:
        """Dispatch-row label, e.g. '300x450 (Rose)'"""
        return display_size(self.size, self.cutting_size, self.type, self.print_name)
