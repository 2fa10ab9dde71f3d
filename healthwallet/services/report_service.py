"""Report upload, retrieval and deletion."""

import logging
from datetime import date
from typing import Iterable, List, Optional

from sqlalchemy import desc, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload

from ..core.config import Settings
from ..core.exceptions import ReportValidationError
from ..models import Report, ReportVital, SharedAccess, User, VitalType
from ..utils.file_utils import (
    clean_original_filename,
    format_file_size,
    is_allowed_file,
)
from .storage_service import StorageService

logger = logging.getLogger(__name__)


def parse_report_date(value: Optional[str]) -> date:
    try:
        return date.fromisoformat((value or "").strip())
    except ValueError:
        raise ReportValidationError("Report date must be a valid date (YYYY-MM-DD)")


def parse_vital_tags(values: Optional[Iterable[str]]) -> List[VitalType]:
    """Turn submitted tag strings into a de-duplicated list of vital types."""
    tags: List[VitalType] = []
    for raw in values or []:
        raw = (raw or "").strip()
        if not raw:
            continue
        try:
            tag = VitalType(raw)
        except ValueError:
            raise ReportValidationError(f"Invalid vital type: {raw}")
        if tag not in tags:
            tags.append(tag)
    return tags


class ReportService:
    """Report operations scoped to the requesting user."""

    def __init__(self, db: Session, settings: Settings, storage: StorageService):
        self.db = db
        self.settings = settings
        self.storage = storage

    def check_file(self, filename: Optional[str], size: int) -> None:
        """Reject files before anything is written to disk."""
        if not filename:
            raise ReportValidationError("No file uploaded")
        if not is_allowed_file(filename, self.settings.allowed_extensions):
            allowed = ", ".join(sorted(self.settings.allowed_extensions))
            raise ReportValidationError(f"File type not allowed. Allowed types: {allowed}")
        if size > self.settings.max_file_size_bytes:
            raise ReportValidationError(
                f"File too large ({format_file_size(size)}). "
                f"Maximum size: {self.settings.max_file_size_mb}MB"
            )

    def upload(
        self,
        user: User,
        content: bytes,
        filename: str,
        report_type: Optional[str],
        report_date: Optional[str],
        vital_types: Optional[Iterable[str]] = None,
    ) -> Report:
        """
        Store an uploaded report file and record its metadata.

        The file is written first; if the metadata then fails validation or
        the insert fails, the file is removed again so no orphan is left.

        Raises:
            ReportValidationError: bad file or metadata
            SQLAlchemyError: the row could not be saved
        """
        self.check_file(filename, len(content))
        stored = self.storage.save_file(content, filename, user.id)

        try:
            report_type = (report_type or "").strip()
            if not report_type or not (report_date or "").strip():
                raise ReportValidationError("Report type and date are required")

            report = Report(
                user_id=user.id,
                file_path=stored["file_path"],
                file_name=clean_original_filename(filename),
                report_type=report_type,
                report_date=parse_report_date(report_date),
            )
            report.vital_tags = [
                ReportVital(vital_type=tag) for tag in parse_vital_tags(vital_types)
            ]
            self.db.add(report)
            self.db.commit()
        except ReportValidationError:
            logger.info("Upload rejected, removing %s", stored["file_path"])
            self.storage.delete_file(stored["file_path"])
            raise
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception("Failed to save report, removing %s", stored["file_path"])
            self.storage.delete_file(stored["file_path"])
            raise

        self.db.refresh(report)
        logger.info("User %s uploaded report %s (%s)", user.id, report.id, report.report_type)
        return report

    def list_reports(
        self,
        user: User,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        report_type: Optional[str] = None,
        vital_type: Optional[VitalType] = None,
        limit: Optional[int] = None,
    ) -> List[Report]:
        """Owner's reports, newest report date first."""
        query = (
            self.db.query(Report)
            .options(selectinload(Report.vital_tags))
            .filter(Report.user_id == user.id)
        )
        if start_date:
            query = query.filter(Report.report_date >= start_date)
        if end_date:
            query = query.filter(Report.report_date <= end_date)
        if report_type:
            query = query.filter(Report.report_type == report_type)
        if vital_type:
            query = query.filter(Report.vital_tags.any(ReportVital.vital_type == vital_type))

        query = query.order_by(desc(Report.report_date), desc(Report.id))
        if limit:
            query = query.limit(limit)
        return query.all()

    def list_shared_with(self, user: User) -> List[Report]:
        """Reports other users granted the caller access to."""
        return (
            self.db.query(Report)
            .join(SharedAccess, SharedAccess.report_id == Report.id)
            .options(selectinload(Report.vital_tags), selectinload(Report.user))
            .filter(SharedAccess.shared_with_email == user.email)
            .order_by(desc(Report.report_date), desc(Report.id))
            .all()
        )

    def get_visible(self, report_id: int, user: User) -> Optional[Report]:
        """The report if the caller owns it or holds a grant for it."""
        has_grant = Report.shares.any(SharedAccess.shared_with_email == user.email)
        return (
            self.db.query(Report)
            .options(selectinload(Report.vital_tags))
            .filter(Report.id == report_id, or_(Report.user_id == user.id, has_grant))
            .first()
        )

    def get_owned(self, report_id: int, user: User) -> Optional[Report]:
        return (
            self.db.query(Report)
            .filter(Report.id == report_id, Report.user_id == user.id)
            .first()
        )

    def delete(self, report_id: int, user: User) -> bool:
        """
        Delete an owned report and its file.

        Returns:
            False when the report does not exist or belongs to someone else
        """
        report = self.get_owned(report_id, user)
        if report is None:
            return False

        self.storage.delete_file(report.file_path)
        self.db.delete(report)
        self.db.commit()
        logger.info("User %s deleted report %s", user.id, report_id)
        return True
