"""Declarative base and shared column mixins."""

from datetime import datetime
from enum import Enum

from sqlalchemy import Column, DateTime
from sqlalchemy import Enum as SAEnum
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class VitalType(str, Enum):
    """Fixed vocabulary of vital-sign measurements."""

    BP = "BP"
    SUGAR = "Sugar"
    HEART_RATE = "Heart Rate"
    OXYGEN = "Oxygen"
    TEMPERATURE = "Temperature"
    WEIGHT = "Weight"


def vital_type_column_type() -> SAEnum:
    """Column type storing ``VitalType`` values, with a CHECK constraint."""
    return SAEnum(
        VitalType,
        name="vital_type",
        values_callable=lambda enum: [member.value for member in enum],
        native_enum=False,
        create_constraint=True,
        validate_strings=True,
        length=32,
    )


class TimestampMixin:
    """Adds a creation timestamp column."""

    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
