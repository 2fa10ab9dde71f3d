"""
Sharing request/response schemas.
"""

from typing import List, Optional
from datetime import date, datetime
from pydantic import BaseModel, Field, field_validator

from healthwallet.schemas.common import MAX_ID, normalize_email


class ShareCreate(BaseModel):
    report_id: int = Field(..., ge=1, le=MAX_ID)
    shared_with_email: str

    @field_validator("shared_with_email")
    @classmethod
    def clean_email(cls, v: str) -> str:
        return normalize_email(v)


class ShareOut(BaseModel):
    id: int
    report_id: int
    shared_with_email: str
    access_type: str
    shared_at: datetime

    class Config:
        from_attributes = True


class SentShareOut(ShareOut):
    """A grant on one of the caller's reports, with report details."""

    file_name: str
    report_type: str
    report_date: date
    shared_with_name: Optional[str] = None


class ShareCreateResponse(BaseModel):
    message: str
    share: ShareOut


class SentShareListResponse(BaseModel):
    shares: List[SentShareOut]
