"""Report sharing grants."""

from datetime import datetime

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
    Index,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship
from .base import Base

DEFAULT_ACCESS_TYPE = "read"


class SharedAccess(Base):
    """Grant giving one recipient email read access to one report."""

    __tablename__ = "shared_access"

    id = Column(Integer, primary_key=True, autoincrement=True)
    report_id = Column(
        Integer, ForeignKey("reports.id", ondelete="CASCADE"), nullable=False
    )
    shared_with_email = Column(String, nullable=False)
    access_type = Column(String, nullable=False, default=DEFAULT_ACCESS_TYPE)
    shared_at = Column(DateTime, nullable=False, default=datetime.utcnow)

    report = relationship("Report", back_populates="shares")

    __table_args__ = (
        UniqueConstraint(
            "report_id", "shared_with_email", name="uq_shared_access_report_email"
        ),
        Index("idx_shared_access_email", "shared_with_email"),
    )
