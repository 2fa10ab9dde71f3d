"""
Vital sign endpoints: record, list, trends and delete.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status

from healthwallet.core.dependencies import get_current_user, get_vital_service
from healthwallet.models import User, VitalType
from healthwallet.schemas.common import MAX_ID, MessageResponse
from healthwallet.schemas.vital import (
    TrendsResponse,
    VitalCreate,
    VitalCreateResponse,
    VitalListResponse,
    VitalOut,
)
from healthwallet.services.vital_service import VitalService

router = APIRouter(prefix="/vitals", tags=["vitals"])


@router.post("", response_model=VitalCreateResponse, status_code=status.HTTP_201_CREATED)
async def record_vital(
    payload: VitalCreate,
    current_user: User = Depends(get_current_user),
    vital_service: VitalService = Depends(get_vital_service),
):
    vital = vital_service.record(
        current_user, payload.vital_type, payload.value, payload.recorded_at
    )
    return VitalCreateResponse(
        message="Vital recorded successfully", vital=VitalOut.model_validate(vital)
    )


@router.get("", response_model=VitalListResponse)
async def list_vitals(
    vital_type: Optional[VitalType] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_user),
    vital_service: VitalService = Depends(get_vital_service),
):
    """List the caller's vitals, newest first. Date bounds are inclusive."""
    vitals = vital_service.list_vitals(
        current_user, vital_type=vital_type, start_date=start_date, end_date=end_date
    )
    return VitalListResponse(vitals=[VitalOut.model_validate(v) for v in vitals])


@router.get("/trends", response_model=TrendsResponse)
async def vital_trends(
    vital_type: Optional[VitalType] = Query(None),
    start_date: Optional[date] = Query(None),
    end_date: Optional[date] = Query(None),
    current_user: User = Depends(get_current_user),
    vital_service: VitalService = Depends(get_vital_service),
):
    """
    Chart-ready series, one per vital type present:

        {"BP": [{"value": 120.0, "date": "..."}], "Sugar": [...]}

    Each series is in ascending time order.
    """
    trends = vital_service.trends(
        current_user, vital_type=vital_type, start_date=start_date, end_date=end_date
    )
    return TrendsResponse(trends=trends)


@router.delete("/{vital_id}", response_model=MessageResponse)
async def delete_vital(
    vital_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    vital_service: VitalService = Depends(get_vital_service),
):
    if not vital_service.delete(vital_id, current_user):
        raise HTTPException(status_code=404, detail="Vital not found or access denied")
    return MessageResponse(message="Vital deleted successfully")
