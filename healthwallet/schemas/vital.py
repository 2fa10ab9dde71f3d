"""
Vital sign request/response schemas.
"""

from typing import Dict, List, Optional
from datetime import datetime, timezone
from pydantic import BaseModel, Field, field_validator

from healthwallet.models.base import VitalType


class VitalCreate(BaseModel):
    """Body of ``POST /api/vitals``."""

    vital_type: VitalType = Field(
        ..., description="One of: " + ", ".join(t.value for t in VitalType)
    )
    value: float = Field(..., allow_inf_nan=False)
    recorded_at: Optional[datetime] = Field(
        None, description="Defaults to the current time when omitted"
    )

    @field_validator("vital_type", mode="before")
    @classmethod
    def known_vital_type(cls, v):
        if isinstance(v, VitalType):
            return v
        try:
            return VitalType(v)
        except ValueError:
            raise ValueError("Invalid vital type")

    @field_validator("recorded_at")
    @classmethod
    def to_naive_utc(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Stored timestamps are naive UTC."""
        if v is not None and v.tzinfo is not None:
            v = v.astimezone(timezone.utc).replace(tzinfo=None)
        return v


class VitalOut(BaseModel):
    id: int
    user_id: int
    vital_type: VitalType
    value: float
    recorded_at: datetime

    class Config:
        from_attributes = True


class VitalCreateResponse(BaseModel):
    message: str
    vital: VitalOut


class VitalListResponse(BaseModel):
    vitals: List[VitalOut]


class TrendPoint(BaseModel):
    value: float
    date: datetime


class TrendsResponse(BaseModel):
    """Vital values grouped by type, each series in ascending time order."""

    trends: Dict[str, List[TrendPoint]]
