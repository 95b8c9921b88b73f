"""Plant order model"""

import enum
from sqlalchemy import Column, Integer, String, DateTime, Float, Date, Enum
from sqlalchemy.sql import func
from ..database.connection import Base


class OrderStatus(str, enum.Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"


class PlantOrder(Base):
    """A coil demand waiting in the plant queue"""
    __tablename__ = "plant_orders"
    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=True)
    party_code = Column(String(255), nullable=False, index=True)
    # 'LABEL' for single label entries
    sizer = Column(String(64), nullable=True)
    # slit width (mm)
    size = Column(Float, nullable=False)
    micron = Column(Float, nullable=False)
    # target net weight (kg)
    qty = Column(Float, nullable=False)
    meter = Column(Float, nullable=True)
    status = Column(Enum(OrderStatus), nullable=False, default=OrderStatus.PENDING, index=True)
    created_at = Column(DateTime, server_default=func.now())
