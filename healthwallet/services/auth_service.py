"""User registration, login and token resolution."""

import logging
from typing import Optional, Tuple

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..core.config import Settings
from ..core.exceptions import EmailAlreadyRegisteredError
from ..core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from ..models import User
from ..models.user import DEFAULT_ROLE

logger = logging.getLogger(__name__)


class AuthService:
    """Account operations over one database session."""

    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings

    def get_user(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def register(self, name: str, email: str, password: str) -> Tuple[User, str]:
        """
        Create a user and issue a token for it.

        Raises:
            EmailAlreadyRegisteredError: the email is taken
        """
        if self.get_user_by_email(email):
            raise EmailAlreadyRegisteredError(email)

        user = User(
            name=name,
            email=email,
            password_hash=hash_password(password),
            role=DEFAULT_ROLE,
        )
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.db.rollback()
            raise EmailAlreadyRegisteredError(email)
        self.db.refresh(user)

        logger.info("Registered user %s (%s)", user.id, user.email)
        return user, self.issue_token(user)

    def login(self, email: str, password: str) -> Optional[Tuple[User, str]]:
        """Return (user, token) for valid credentials, None otherwise."""
        user = self.get_user_by_email(email)
        if not user or not verify_password(password, user.password_hash):
            logger.warning("Failed login for %s", email)
            return None
        return user, self.issue_token(user)

    def issue_token(self, user: User) -> str:
        return create_access_token(user.id, user.email, self.settings)

    def authenticate(self, token: str) -> Optional[User]:
        """
        Resolve a bearer token to a still-existing user.

        Raises:
            JWTError: the token is malformed, tampered with or expired
        """
        user_id = decode_access_token(token, self.settings)
        return self.get_user(user_id)
