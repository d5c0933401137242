"""Request principal and route policy enforcement.

AuthorizedRoute is the route class of every router. It resolves the bearer
token to a User (or None for anonymous callers) and applies the route
policy before FastAPI reads the request body, so a caller without access
gets 401/403 even when the body is malformed. The resolved user is kept on
request.state for get_current_user().
"""
from typing import Any, Callable, Coroutine

from fastapi import HTTPException, Request, Response
from fastapi.routing import APIRoute

from core.auth.policy import check_access, policy_for
from core.auth.service import AuthenticationService
from core.errors import ERROR_UNAUTHORIZED, InvalidTokenError
from core.logging import get_logger
from core.routers.deps import get_auth_service
from core.services.models import User

logger = get_logger(__name__)


def _bearer_token(authorization: str) -> str:
    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise InvalidTokenError(authorization)
    return parts[1]


def _auth_service(request: Request) -> AuthenticationService:
    # Honors app.dependency_overrides like a Depends(get_auth_service) would
    provider = request.app.dependency_overrides.get(get_auth_service, get_auth_service)
    return provider()


async def resolve_principal(
    authorization: str | None, auth: AuthenticationService
) -> User | None:
    """Map an Authorization header to a User; None when the header is absent."""
    if not authorization:
        return None
    token = _bearer_token(authorization)
    user_id = auth.parse_token(token)
    return await auth.load_user_by_id(user_id)


async def authorize(request: Request, path: str) -> User | None:
    """Resolve the caller and enforce ROUTE_POLICY for the route at ``path``."""
    access = policy_for(request.method, path)

    try:
        user = await resolve_principal(
            request.headers.get("Authorization"), _auth_service(request)
        )
    except InvalidTokenError:
        logger.warning("Rejected invalid token on %s %s", request.method, path)
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)

    check_access(access, user)
    return user


class AuthorizedRoute(APIRoute):
    """APIRoute that authorizes the caller before the handler is solved."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        route_handler = super().get_route_handler()
        path = self.path

        async def authorized_route_handler(request: Request) -> Response:
            request.state.user = await authorize(request, path)
            return await route_handler(request)

        return authorized_route_handler


async def get_current_user(request: Request) -> User:
    """Authenticated caller. Routes using this are AUTHENTICATED or ADMIN."""
    user = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)
    return user
