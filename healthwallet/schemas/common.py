"""
Pydantic schemas shared across endpoints.
"""

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

# Largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2**63 - 1


# Health Check Schema
class HealthCheck(BaseModel):
    """Health check response schema."""

    status: str = "OK"
    message: str = "Health Wallet API is running"
    version: str
    timestamp: datetime = Field(default_factory=datetime.now)


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


# Error Schema
class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str


def normalize_email(value: Optional[str]) -> Optional[str]:
    """Trim and lower-case an email; reject values without an @."""
    if value is None:
        return value
    value = value.strip().lower()
    if "@" not in value or value.startswith("@") or value.endswith("@"):
        raise ValueError("A valid email address is required")
    return value
