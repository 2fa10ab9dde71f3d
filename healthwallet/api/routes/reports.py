"""
Report upload, listing and deletion endpoints.
"""

import logging
from datetime import date
from typing import List, Optional

from fastapi import (
    APIRouter,
    Depends,
    File,
    Form,
    HTTPException,
    Path,
    Query,
    UploadFile,
    status,
)
from sqlalchemy.exc import SQLAlchemyError

from healthwallet.core.dependencies import get_current_user, get_report_service
from healthwallet.core.exceptions import ReportValidationError
from healthwallet.models import User, VitalType
from healthwallet.schemas.common import MAX_ID, ErrorResponse, MessageResponse
from healthwallet.schemas.report import (
    ReportDetailResponse,
    ReportListResponse,
    ReportOut,
    ReportUploadResponse,
    SharedReportListResponse,
    SharedReportOut,
)
from healthwallet.services.report_service import ReportService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reports", tags=["reports"])


@router.post(
    "/upload", response_model=ReportUploadResponse, status_code=status.HTTP_201_CREATED
)
async def upload_report(
    file: Optional[UploadFile] = File(None),
    report_type: Optional[str] = Form(None),
    report_date: Optional[str] = Form(None),
    vital_types: Optional[List[str]] = Form(None),
    current_user: User = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
):
    """
    Upload a medical report (PDF or image) with its type and date.

    Multipart fields:
        file: the report file
        report_type: e.g. "Blood Test"
        report_date: YYYY-MM-DD
        vital_types: optional, repeatable; vital types the report covers

    If the metadata is rejected after the file was stored, the file is
    removed again.
    """
    if file is None or not file.filename:
        raise HTTPException(status_code=400, detail="No file uploaded")

    content = await file.read()
    try:
        report = report_service.upload(
            current_user,
            content,
            file.filename,
            report_type,
            report_date,
            vital_types,
        )
    except ReportValidationError as e:
        logger.info("Upload rejected for user %s: %s", current_user.id, e)
        raise HTTPException(status_code=400, detail=str(e))
    except SQLAlchemyError:
        raise HTTPException(status_code=500, detail="Failed to save report")
    finally:
        await file.close()

    return ReportUploadResponse(
        message="Report uploaded successfully", report=ReportOut.model_validate(report)
    )


@router.get("", response_model=ReportListResponse)
async def list_reports(
    start_date: Optional[date] = Query(None, description="Inclusive, YYYY-MM-DD"),
    end_date: Optional[date] = Query(None, description="Inclusive, YYYY-MM-DD"),
    report_type: Optional[str] = Query(None),
    vital_type: Optional[VitalType] = Query(None, description="Only reports tagged with this vital"),
    limit: Optional[int] = Query(None, ge=1, le=500),
    current_user: User = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
):
    reports = report_service.list_reports(
        current_user,
        start_date=start_date,
        end_date=end_date,
        report_type=report_type,
        vital_type=vital_type,
        limit=limit,
    )
    return ReportListResponse(reports=[ReportOut.model_validate(r) for r in reports])


@router.get("/shared", response_model=SharedReportListResponse)
async def list_shared_reports(
    current_user: User = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
):
    """Reports other users have shared with the caller."""
    reports = report_service.list_shared_with(current_user)
    return SharedReportListResponse(
        reports=[SharedReportOut.from_report(r) for r in reports]
    )


@router.get(
    "/{report_id}",
    response_model=ReportDetailResponse,
    responses={404: {"model": ErrorResponse}},
)
async def get_report(
    report_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
):
    report = report_service.get_visible(report_id, current_user)
    if report is None:
        raise HTTPException(status_code=404, detail="Report not found")
    return ReportDetailResponse(report=ReportOut.model_validate(report))


@router.delete(
    "/{report_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
async def delete_report(
    report_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    report_service: ReportService = Depends(get_report_service),
):
    if not report_service.delete(report_id, current_user):
        raise HTTPException(status_code=404, detail="Report not found or access denied")
    return MessageResponse(message="Report deleted successfully")
