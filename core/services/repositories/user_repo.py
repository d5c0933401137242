"""User Repository - User CRUD operations.

All methods use async/await with supabase-py v2.
"""

from postgrest.exceptions import APIError

from core.db import Tables
from core.errors import UserEmailDuplicationError
from core.logging import get_logger, sanitize_id_for_logging
from core.services.models import Role, User

from .base import BaseRepository, is_unique_violation

logger = get_logger(__name__)


class UserRepository(BaseRepository):
    """User database operations."""

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID."""
        result = await self.client.table(Tables.USERS).select("*").eq("id", user_id).execute()
        return User(**result.data[0]) if result.data else None

    async def get_by_email(self, email: str) -> User | None:
        """Get user by email (used for login)."""
        result = await self.client.table(Tables.USERS).select("*").eq("email", email).execute()
        return User(**result.data[0]) if result.data else None

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an email is registered without loading the row."""
        result = await (
            self.client.table(Tables.USERS)
            .select("id", count="exact")
            .eq("email", email)
            .limit(1)
            .execute()
        )
        return bool(result.count)

    async def create(self, email: str, name: str, password: str, role: Role = Role.USER) -> User:
        """Insert a user. ``password`` must already be hashed."""
        data = {"email": email, "name": name, "password": password, "role": role.value}
        try:
            result = await self.client.table(Tables.USERS).insert(data).execute()
        except APIError as e:
            # Lost the race against a concurrent registration
            if is_unique_violation(e):
                raise UserEmailDuplicationError(email) from e
            raise
        return User(**result.data[0])

    async def update_name(self, user_id: int, name: str) -> None:
        """Update user's display name."""
        await self.client.table(Tables.USERS).update({"name": name}).eq("id", user_id).execute()

    async def delete(self, user_id: int) -> None:
        """Delete user row."""
        await self.client.table(Tables.USERS).delete().eq("id", user_id).execute()
        logger.info("Deleted user %s", sanitize_id_for_logging(user_id))
