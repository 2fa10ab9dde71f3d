"""
Schemas package initialization.
"""

from healthwallet.schemas.common import HealthCheck, MessageResponse, ErrorResponse
from healthwallet.schemas.auth import (
    RegisterRequest,
    LoginRequest,
    UserOut,
    AuthResponse,
    MeResponse,
)
from healthwallet.schemas.report import (
    ReportOut,
    SharedReportOut,
    ReportUploadResponse,
    ReportDetailResponse,
    ReportListResponse,
    SharedReportListResponse,
)
from healthwallet.schemas.vital import (
    VitalCreate,
    VitalOut,
    VitalCreateResponse,
    VitalListResponse,
    TrendPoint,
    TrendsResponse,
)
from healthwallet.schemas.share import (
    ShareCreate,
    ShareOut,
    SentShareOut,
    ShareCreateResponse,
    SentShareListResponse,
)

__all__ = [
    "HealthCheck",
    "MessageResponse",
    "ErrorResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserOut",
    "AuthResponse",
    "MeResponse",
    "ReportOut",
    "SharedReportOut",
    "ReportUploadResponse",
    "ReportDetailResponse",
    "ReportListResponse",
    "SharedReportListResponse",
    "VitalCreate",
    "VitalOut",
    "VitalCreateResponse",
    "VitalListResponse",
    "TrendPoint",
    "TrendsResponse",
    "ShareCreate",
    "ShareOut",
    "SentShareOut",
    "ShareCreateResponse",
    "SentShareListResponse",
]
