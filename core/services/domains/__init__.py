"""Domain services wrapping repositories."""
from .products import ProductService
from .users import UserService
from .cart import CartService

__all__ = [
    "ProductService",
    "UserService",
    "CartService",
]
