"""Route policy: which principals may call which route.

Every route is looked up in ROUTE_POLICY by (method, path template) and
checked by AuthorizedRoute before its handler runs. Routes missing from the
table are admin-only.
"""
from enum import Enum

from fastapi import HTTPException

from core.errors import ERROR_FORBIDDEN, ERROR_UNAUTHORIZED
from core.services.models import User


class Access(str, Enum):
    """Who may call a route."""
    ANY = "any"
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"
    ADMIN = "admin"


ROUTE_POLICY: dict[tuple[str, str], Access] = {
    # Products
    ("GET", "/api/products"): Access.ANY,
    ("GET", "/api/products/{product_id}"): Access.ANY,
    ("POST", "/api/products"): Access.ADMIN,
    # Users
    ("POST", "/api/users"): Access.ANONYMOUS,
    ("GET", "/api/users/me"): Access.AUTHENTICATED,
    ("PATCH", "/api/users/me"): Access.AUTHENTICATED,
    ("DELETE", "/api/users/me"): Access.AUTHENTICATED,
    # Session
    ("POST", "/api/session"): Access.ANONYMOUS,
    # Cart
    ("GET", "/api/carts"): Access.AUTHENTICATED,
    ("POST", "/api/carts"): Access.AUTHENTICATED,
}

DEFAULT_ACCESS = Access.ADMIN


def policy_for(method: str, path: str) -> Access:
    return ROUTE_POLICY.get((method.upper(), path), DEFAULT_ACCESS)


def check_access(access: Access, user: User | None) -> None:
    """Raise 401/403 unless ``user`` satisfies ``access``.

    ``user`` is None for anonymous callers.
    """
    if access == Access.ANY:
        return
    if access == Access.ANONYMOUS:
        if user is not None:
            raise HTTPException(status_code=403, detail=ERROR_FORBIDDEN)
        return
    if user is None:
        raise HTTPException(status_code=401, detail=ERROR_UNAUTHORIZED)
    if access == Access.ADMIN and not user.is_admin:
        raise HTTPException(status_code=403, detail=ERROR_FORBIDDEN)
