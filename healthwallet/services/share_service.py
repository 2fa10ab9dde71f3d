"""Granting, listing and revoking report access."""

import logging
from typing import List, Optional

from sqlalchemy import desc
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.exceptions import AlreadySharedError
from ..models import Report, SharedAccess, User
from ..models.shared_access import DEFAULT_ACCESS_TYPE

logger = logging.getLogger(__name__)


class ShareService:
    """Sharing operations performed by a report owner."""

    def __init__(self, db: Session):
        self.db = db

    def share(self, user: User, report_id: int, email: str) -> Optional[SharedAccess]:
        """
        Grant ``email`` read access to one of the caller's reports.

        Returns:
            The new grant, or None if the caller does not own the report

        Raises:
            AlreadySharedError: a grant for this report and email exists
        """
        report = (
            self.db.query(Report)
            .filter(Report.id == report_id, Report.user_id == user.id)
            .first()
        )
        if report is None:
            return None

        grant = SharedAccess(
            report_id=report.id,
            shared_with_email=email,
            access_type=DEFAULT_ACCESS_TYPE,
        )
        self.db.add(grant)
        try:
            self.db.commit()
        except IntegrityError:
            # uq_shared_access_report_email
            self.db.rollback()
            raise AlreadySharedError(report.id, email)
        self.db.refresh(grant)

        logger.info("User %s shared report %s with %s", user.id, report.id, email)
        return grant

    def list_sent(self, user: User) -> List[dict]:
        """Grants on the caller's reports, newest first."""
        rows = (
            self.db.query(SharedAccess, Report, User.name)
            .join(Report, SharedAccess.report_id == Report.id)
            .outerjoin(User, User.email == SharedAccess.shared_with_email)
            .filter(Report.user_id == user.id)
            .order_by(desc(SharedAccess.shared_at), desc(SharedAccess.id))
            .all()
        )
        return [
            {
                "id": grant.id,
                "report_id": grant.report_id,
                "shared_with_email": grant.shared_with_email,
                "access_type": grant.access_type,
                "shared_at": grant.shared_at,
                "file_name": report.file_name,
                "report_type": report.report_type,
                "report_date": report.report_date,
                "shared_with_name": recipient_name,
            }
            for grant, report, recipient_name in rows
        ]

    def revoke(self, share_id: int, user: User) -> bool:
        """Delete a grant on one of the caller's reports; False if none matched."""
        grant = (
            self.db.query(SharedAccess)
            .join(Report, SharedAccess.report_id == Report.id)
            .filter(SharedAccess.id == share_id, Report.user_id == user.id)
            .first()
        )
        if grant is None:
            return False

        self.db.delete(grant)
        self.db.commit()
        logger.info("User %s revoked share %s", user.id, share_id)
        return True
