"""User domain service wrapping UserRepository."""
from typing import Callable

from core.auth.passwords import hash_password
from core.errors import UserEmailDuplicationError, UserNotFoundError
from core.logging import get_logger, sanitize_id_for_logging
from core.models import UserRegisterData, UserUpdateData
from core.services.models import Role, User
from core.services.repositories import UserRepository

logger = get_logger(__name__)


class UserService:
    """Registration and self-service profile operations."""

    def __init__(
        self,
        repo: UserRepository,
        password_hasher: Callable[[str], str] = hash_password,
    ) -> None:
        self.repo = repo
        self.hash_password = password_hasher

    async def get_user(self, user_id: int) -> User:
        user = await self.repo.get_by_id(user_id)
        if user is None:
            raise UserNotFoundError(user_id)
        return user

    async def register_user(self, data: UserRegisterData) -> int:
        """Create a USER account and return its id."""
        email = str(data.email)
        if await self.repo.exists_by_email(email):
            logger.warning("Rejected registration with an existing email")
            raise UserEmailDuplicationError(email)

        user = await self.repo.create(
            email=email,
            name=data.name,
            password=self.hash_password(data.password),
            role=Role.USER,
        )
        logger.info("Registered user %s", sanitize_id_for_logging(user.id))
        return user.id

    async def update_user(self, user: User, data: UserUpdateData) -> User:
        """Rename ``user``; no other attribute is mutable here."""
        user.name = data.name
        await self.repo.update_name(user.id, data.name)
        return user

    async def delete_user(self, user: User) -> None:
        """Delete ``user``; their cart rows go with it (ON DELETE CASCADE)."""
        await self.repo.delete(user.id)
        logger.info("Deleted user %s", sanitize_id_for_logging(user.id))
