"""Vital sign model."""

from datetime import datetime

from sqlalchemy import Column, Integer, Float, DateTime, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, vital_type_column_type


class Vital(Base):
    """A single timestamped measurement of one vital type."""

    __tablename__ = "vitals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    vital_type = Column(vital_type_column_type(), nullable=False)
    value = Column(Float, nullable=False)
    recorded_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    user = relationship("User", back_populates="vitals")

    __table_args__ = (
        Index("idx_vitals_user_id", "user_id"),
        Index("idx_vitals_recorded_at", "recorded_at"),
    )
