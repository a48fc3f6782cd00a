"""
User Repository - SQL data access for user accounts
"""

from typing import Optional, List
from uuid import UUID, uuid4
from datetime import datetime, timezone
from sqlalchemy import func
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError

from repositories.base import BaseRepository
from domain.interfaces import UserRepository
from domain.models import User
from app.exceptions import ConflictError


class SqlUserRepository(BaseRepository[User], UserRepository):
    """UserRepository backed by a SQLAlchemy session"""

    id_field = "user_id"

    def __init__(self, db: Session):
        super().__init__(db, User)

    def add(self, email: str, full_name: Optional[str] = None, phone: Optional[str] = None) -> User:
        """Create a new user"""
        email = email.strip().lower()
        if self.get_by_email(email) is not None:
            raise ConflictError(
                f"User with email {email} already exists", code="EMAIL_TAKEN"
            )
        user = User(
            user_id=uuid4(),
            email=email,
            full_name=full_name,
            phone=phone,
            created_at=datetime.now(timezone.utc),
        )
        try:
            return self.create(user)
        except IntegrityError:
            self.db.rollback()
            raise ConflictError(
                f"User with email {email} already exists", code="EMAIL_TAKEN"
            )

    def get(self, user_id: UUID) -> Optional[User]:
        return self.get_by_id(user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email (case-insensitive)"""
        return (
            self.db.query(User)
            .filter(func.lower(User.email) == email.strip().lower())
            .first()
        )

    def list(self) -> List[User]:
        return self.db.query(User).order_by(User.created_at.asc()).all()

    def remove(self, user_id: UUID) -> bool:
        """Delete user and their orders (cascade)"""
        return self.delete(user_id)
