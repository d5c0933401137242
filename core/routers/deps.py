"""
Shared Dependencies for Routers

Service accessors resolved from the Database singleton. Routers depend on
these (not on get_database directly) so tests can swap services through
app.dependency_overrides.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from core.auth.service import AuthenticationService
    from core.services.domains import CartService, ProductService, UserService


def get_product_service() -> "ProductService":
    from core.services.database import get_database
    return get_database().product_service


def get_user_service() -> "UserService":
    from core.services.database import get_database
    return get_database().user_service


def get_cart_service() -> "CartService":
    from core.services.database import get_database
    return get_database().cart_service


def get_auth_service() -> "AuthenticationService":
    from core.services.database import get_database
    return get_database().auth_service
