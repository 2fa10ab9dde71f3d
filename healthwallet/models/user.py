"""User model."""

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from .base import Base, TimestampMixin

DEFAULT_ROLE = "Owner"


class User(Base, TimestampMixin):
    """Registered account owning reports and vitals."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(String, nullable=False, default=DEFAULT_ROLE)

    # Relationships
    reports = relationship(
        "Report",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    vitals = relationship(
        "Vital",
        back_populates="user",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
