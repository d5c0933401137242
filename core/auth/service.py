"""Authentication service: login and token-to-user resolution."""
from typing import Callable

from core.auth.passwords import verify_password
from core.auth.tokens import create_access_token, decode_access_token
from core.errors import InvalidTokenError, LoginFailError
from core.logging import get_logger, sanitize_id_for_logging
from core.services.models import User
from core.services.repositories import UserRepository

logger = get_logger(__name__)


class AuthenticationService:
    """Issues access tokens and resolves them back to users."""

    def __init__(
        self,
        repo: UserRepository,
        password_verifier: Callable[[str, str], bool] = verify_password,
    ):
        self.repo = repo
        self.verify_password = password_verifier

    async def login(self, email: str, password: str) -> str:
        """Return an access token for valid credentials."""
        user = await self.repo.get_by_email(email)
        if user is None or not self.verify_password(password, user.password):
            raise LoginFailError(email)
        logger.info("User %s logged in", sanitize_id_for_logging(user.id))
        return create_access_token(user.id)

    def parse_token(self, token: str) -> int:
        return decode_access_token(token)

    async def load_user_by_id(self, user_id: int) -> User:
        user = await self.repo.get_by_id(user_id)
        if user is None:
            # Token outlived its user
            raise InvalidTokenError()
        return user
