"""
Shared dependencies for FastAPI dependency injection.
"""

from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from healthwallet.core.config import Settings
from healthwallet.core.database import get_db
from healthwallet.core.security import JWTError
from healthwallet.models import User
from healthwallet.services.auth_service import AuthService
from healthwallet.services.report_service import ReportService
from healthwallet.services.share_service import ShareService
from healthwallet.services.storage_service import StorageService
from healthwallet.services.vital_service import VitalService

bearer_scheme = HTTPBearer(auto_error=False)


def get_settings_dependency(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_storage_service(
    settings: Settings = Depends(get_settings_dependency),
) -> StorageService:
    return StorageService(settings)


def get_auth_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dependency),
) -> AuthService:
    return AuthService(db, settings)


def get_report_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings_dependency),
    storage: StorageService = Depends(get_storage_service),
) -> ReportService:
    return ReportService(db, settings, storage)


def get_vital_service(db: Session = Depends(get_db)) -> VitalService:
    return VitalService(db)


def get_share_service(db: Session = Depends(get_db)) -> ShareService:
    return ShareService(db)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> User:
    """
    Resolve the bearer token to a user.

    401 when no token is sent, 403 when it is invalid/expired or the user
    it names no longer exists.
    """
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        user = auth_service.authenticate(credentials.credentials)
    except JWTError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN, detail="Invalid or expired token"
        )

    if user is None:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User not found")
    return user
