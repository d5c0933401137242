"""Authentication package."""
from .dependencies import AuthorizedRoute, authorize, get_current_user
from .passwords import hash_password, verify_password
from .policy import ROUTE_POLICY, Access, check_access
from .service import AuthenticationService
from .tokens import create_access_token, decode_access_token

__all__ = [
    "AuthorizedRoute",
    "authorize",
    "get_current_user",
    "hash_password",
    "verify_password",
    "ROUTE_POLICY",
    "Access",
    "check_access",
    "AuthenticationService",
    "create_access_token",
    "decode_access_token",
]
