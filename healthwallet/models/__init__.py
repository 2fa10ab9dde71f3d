"""Database models."""

from .base import Base, VitalType
from .user import User
from .report import Report, ReportVital
from .vital import Vital
from .shared_access import SharedAccess

__all__ = [
    "Base",
    "VitalType",
    "User",
    "Report",
    "ReportVital",
    "Vital",
    "SharedAccess",
]
