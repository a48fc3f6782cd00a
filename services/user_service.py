from typing import List, Optional
from uuid import UUID
import logging

from domain.interfaces import EmailSender, EventLogger, UserRepository
from domain.models import User
from app.exceptions import NotFoundError

logger = logging.getLogger("solidshop.users")

WELCOME_SUBJECT = "Welcome to SolidShop"


class UserService:
    """
    Business logic for user accounts.

    The request handler only parses input and shapes output; storing the
    account, greeting the user and recording the event happen here, each
    through its own collaborator.
    """

    def __init__(self, users: UserRepository, email: EmailSender, events: EventLogger):
        self.users = users
        self.email = email
        self.events = events

    def register(self, email: str, full_name: Optional[str] = None, phone: Optional[str] = None) -> User:
        """
        Create an account and send the welcome e-mail.

        Raises:
            ConflictError: e-mail already registered
        """
        user = self.users.add(email=email, full_name=full_name, phone=phone)
        self.email.send_email(
            to=user.email,
            subject=WELCOME_SUBJECT,
            body=self._welcome_body(user),
        )
        self.events.log("user_registered", user_id=user.user_id, email=user.email)
        logger.info(f"user_registered user_id={user.user_id}")
        return user

    def get(self, user_id: UUID) -> User:
        user = self.users.get(user_id)
        if user is None:
            logger.warning(f"user_not_found user_id={user_id}")
            raise NotFoundError(f"User {user_id} not found")
        return user

    def list(self) -> List[User]:
        return self.users.list()

    def delete(self, user_id: UUID) -> None:
        if not self.users.remove(user_id):
            raise NotFoundError(f"User {user_id} not found")
        self.events.log("user_deleted", user_id=user_id)
        logger.info(f"user_deleted user_id={user_id}")

    @staticmethod
    def _welcome_body(user: User) -> str:
        name = user.full_name or user.email
        return f"Hi {name},\n\nYour SolidShop account is ready.\n"
