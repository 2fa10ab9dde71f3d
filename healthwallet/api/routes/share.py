"""Report sharing endpoints."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status

from healthwallet.core.dependencies import get_current_user, get_share_service
from healthwallet.core.exceptions import AlreadySharedError
from healthwallet.models import User
from healthwallet.schemas.common import MAX_ID, MessageResponse
from healthwallet.schemas.share import (
    SentShareListResponse,
    SentShareOut,
    ShareCreate,
    ShareCreateResponse,
    ShareOut,
)
from healthwallet.services.share_service import ShareService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/share", tags=["share"])


@router.post("", response_model=ShareCreateResponse, status_code=status.HTTP_201_CREATED)
async def share_report(
    payload: ShareCreate,
    current_user: User = Depends(get_current_user),
    share_service: ShareService = Depends(get_share_service),
):
    """Give another person (by email) read access to one of your reports."""
    try:
        grant = share_service.share(current_user, payload.report_id, payload.shared_with_email)
    except AlreadySharedError as e:
        logger.info("Duplicate share of report %s with %s", e.report_id, e.email)
        raise HTTPException(status_code=400, detail=str(e))

    if grant is None:
        raise HTTPException(status_code=404, detail="Report not found or access denied")

    return ShareCreateResponse(
        message="Report shared successfully", share=ShareOut.model_validate(grant)
    )


@router.get("/sent", response_model=SentShareListResponse)
async def list_sent_shares(
    current_user: User = Depends(get_current_user),
    share_service: ShareService = Depends(get_share_service),
):
    shares = share_service.list_sent(current_user)
    return SentShareListResponse(shares=[SentShareOut(**s) for s in shares])


@router.delete("/{share_id}", response_model=MessageResponse)
async def revoke_share(
    share_id: int = Path(..., ge=1, le=MAX_ID),
    current_user: User = Depends(get_current_user),
    share_service: ShareService = Depends(get_share_service),
):
    if not share_service.revoke(share_id, current_user):
        raise HTTPException(status_code=404, detail="Share not found or access denied")
    return MessageResponse(message="Access revoked successfully")
