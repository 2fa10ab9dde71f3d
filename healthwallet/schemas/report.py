"""
Report request/response schemas.
"""

from typing import List
from datetime import date, datetime
from pydantic import BaseModel, Field


class ReportOut(BaseModel):
    """Report metadata with its download URL and vital-type tags."""

    id: int
    user_id: int
    file_name: str
    report_type: str
    report_date: date
    created_at: datetime
    associated_vitals: List[str] = Field(default_factory=list)
    file_url: str

    class Config:
        from_attributes = True


class SharedReportOut(ReportOut):
    """A report somebody else shared with the caller."""

    owner_name: str
    owner_email: str

    @classmethod
    def from_report(cls, report) -> "SharedReportOut":
        base = ReportOut.model_validate(report).model_dump()
        return cls(**base, owner_name=report.user.name, owner_email=report.user.email)


class ReportUploadResponse(BaseModel):
    message: str
    report: ReportOut


class ReportDetailResponse(BaseModel):
    report: ReportOut


class ReportListResponse(BaseModel):
    reports: List[ReportOut]


class SharedReportListResponse(BaseModel):
    reports: List[SharedReportOut]
