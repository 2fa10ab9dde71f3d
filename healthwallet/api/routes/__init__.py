"""
API routes aggregation.
"""

from fastapi import APIRouter

from healthwallet.api.routes.auth import router as auth_router
from healthwallet.api.routes.reports import router as reports_router
from healthwallet.api.routes.share import router as share_router
from healthwallet.api.routes.vitals import router as vitals_router

router = APIRouter()

# Include sub-routers
router.include_router(auth_router)
router.include_router(reports_router)
router.include_router(vitals_router)
router.include_router(share_router)
