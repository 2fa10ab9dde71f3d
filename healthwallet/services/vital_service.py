"""Vital sign recording, listing and trend reshaping."""

import logging
from datetime import date, datetime, time, timedelta
from typing import Dict, Iterable, List, Optional

from sqlalchemy import asc, desc
from sqlalchemy.orm import Session

from ..models import User, Vital, VitalType

logger = logging.getLogger(__name__)


def build_trends(vitals: Iterable[Vital]) -> Dict[str, List[dict]]:
    """
    Group time-ordered vitals into one series per type.

    Input order is preserved inside each series, so passing rows sorted
    ascending by ``recorded_at`` yields ascending series.
    """
    trends: Dict[str, List[dict]] = {}
    for vital in vitals:
        key = VitalType(vital.vital_type).value
        trends.setdefault(key, []).append(
            {"value": vital.value, "date": vital.recorded_at}
        )
    return trends


class VitalService:
    """Vital operations scoped to the requesting user."""

    def __init__(self, db: Session):
        self.db = db

    def record(
        self,
        user: User,
        vital_type: VitalType,
        value: float,
        recorded_at: Optional[datetime] = None,
    ) -> Vital:
        vital = Vital(
            user_id=user.id,
            vital_type=vital_type,
            value=value,
            recorded_at=recorded_at or datetime.utcnow(),
        )
        self.db.add(vital)
        self.db.commit()
        self.db.refresh(vital)
        logger.info("User %s recorded %s=%s", user.id, vital.vital_type.value, value)
        return vital

    def _filtered(
        self,
        user: User,
        vital_type: Optional[VitalType],
        start_date: Optional[date],
        end_date: Optional[date],
    ):
        query = self.db.query(Vital).filter(Vital.user_id == user.id)
        if vital_type:
            query = query.filter(Vital.vital_type == vital_type)
        # Bounds are calendar days, both inclusive; date.max leaves the end open
        if start_date:
            query = query.filter(Vital.recorded_at >= datetime.combine(start_date, time.min))
        if end_date and end_date < date.max:
            next_day = datetime.combine(end_date + timedelta(days=1), time.min)
            query = query.filter(Vital.recorded_at < next_day)
        return query

    def list_vitals(
        self,
        user: User,
        vital_type: Optional[VitalType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> List[Vital]:
        """Newest first, for display."""
        return (
            self._filtered(user, vital_type, start_date, end_date)
            .order_by(desc(Vital.recorded_at), desc(Vital.id))
            .all()
        )

    def trends(
        self,
        user: User,
        vital_type: Optional[VitalType] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Dict[str, List[dict]]:
        vitals = (
            self._filtered(user, vital_type, start_date, end_date)
            .order_by(asc(Vital.recorded_at), asc(Vital.id))
            .all()
        )
        return build_trends(vitals)

    def delete(self, vital_id: int, user: User) -> bool:
        """Delete an owned vital; False if nothing matched."""
        deleted = (
            self.db.query(Vital)
            .filter(Vital.id == vital_id, Vital.user_id == user.id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0
