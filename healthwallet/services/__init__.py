"""
Services package initialization.
"""

from healthwallet.services.auth_service import AuthService
from healthwallet.services.report_service import ReportService
from healthwallet.services.share_service import ShareService
from healthwallet.services.storage_service import StorageService
from healthwallet.services.vital_service import VitalService, build_trends

__all__ = [
    "AuthService",
    "ReportService",
    "ShareService",
    "StorageService",
    "VitalService",
    "build_trends",
]
