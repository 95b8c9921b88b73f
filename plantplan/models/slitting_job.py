"""Slitting job card models

A job card is the frozen result of a confirmed plan: one row per coil with its
fixed roll count and target quantity, plus the weighed rolls the slitting floor
records against each coil.
"""

import enum
from sqlalchemy import Boolean, Column, Integer, String, DateTime, Float, Date, Enum, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class JobStatus(str, enum.Enum):
    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"


class SlittingJob(Base):
    __tablename__ = "slitting_jobs"
    id = Column(Integer, primary_key=True, index=True)
    date = Column(Date, nullable=True)
    job_no = Column(String(64), nullable=False, index=True)
    # party codes joined with ' / '
    job_code = Column(String(255), nullable=False)
    micron = Column(Float, nullable=False)
    # tube width (mm); null means sum of coil sizes
    sizer = Column(Float, nullable=True)
    roll_length = Column(Float, nullable=False)
    plan_qty = Column(Float, nullable=False)
    status = Column(Enum(JobStatus), nullable=False, default=JobStatus.PENDING)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    coils = relationship("SlittingCoil", back_populates="job", order_by="SlittingCoil.number",
                         cascade="all, delete-orphan")
    rows = relationship("SlittingRow", back_populates="job", order_by="SlittingRow.sr_no",
                        cascade="all, delete-orphan")


class SlittingCoil(Base):
    __tablename__ = "slitting_coils"
    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("slitting_jobs.id"), nullable=False, index=True)
    # coil position on the slitter, 1-based
    number = Column(Integer, nullable=False)
    size = Column(Float, nullable=False)
    rolls = Column(Integer, nullable=False)
    target_qty = Column(Float, nullable=True)
    is_multi_up = Column(Boolean, nullable=False, default=False)

    job = relationship("SlittingJob", back_populates="coils")


class SlittingRow(Base):
    __tablename__ = "slitting_rows"
    id = Column(Integer, primary_key=True, index=True)
    job_id = Column(Integer, ForeignKey("slitting_jobs.id"), nullable=False, index=True)
    coil_id = Column(Integer, ForeignKey("slitting_coils.id"), nullable=False, index=True)
    sr_no = Column(Integer, nullable=False)
    gross_weight = Column(Float, nullable=False)
    core_weight = Column(Float, nullable=False)
    net_weight = Column(Float, nullable=False)
    # estimated from net weight, nearest 10 m
    meter = Column(Float, nullable=False, default=0)

    job = relationship("SlittingJob", back_populates="rows")
