"""Report model and its vital-type tags."""

from sqlalchemy import Column, String, Integer, Date, ForeignKey, Index
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin, vital_type_column_type
from ..utils.file_utils import file_url_for


class Report(Base, TimestampMixin):
    """Uploaded medical report file and its metadata."""

    __tablename__ = "reports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    # Relative to the upload directory: "<user_id>/<stored name>"
    file_path = Column(String, nullable=False)
    file_name = Column(String, nullable=False)
    report_type = Column(String, nullable=False)
    report_date = Column(Date, nullable=False)

    # Relationships
    user = relationship("User", back_populates="reports")
    vital_tags = relationship(
        "ReportVital",
        back_populates="report",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    shares = relationship(
        "SharedAccess",
        back_populates="report",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    __table_args__ = (
        Index("idx_reports_user_id", "user_id"),
        Index("idx_reports_date", "report_date"),
    )

    @property
    def associated_vitals(self) -> list:
        return sorted(tag.vital_type.value for tag in self.vital_tags)

    @property
    def file_url(self) -> str:
        return file_url_for(self.file_path)


class ReportVital(Base):
    """Tag linking a report to a vital type it documents."""

    __tablename__ = "report_vitals"

    report_id = Column(
        Integer,
        ForeignKey("reports.id", ondelete="CASCADE"),
        primary_key=True,
    )
    vital_type = Column(vital_type_column_type(), primary_key=True)

    report = relationship("Report", back_populates="vital_tags")
