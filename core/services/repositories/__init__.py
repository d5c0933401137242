"""
Repository Pattern for Database Operations

Provides clean separation of concerns:
- UserRepository: User CRUD, lookup by email
- ProductRepository: Product aggregates, name existence
- CartProductRepository: Cart rows per user
"""
from .user_repo import UserRepository
from .product_repo import ProductRepository
from .cart_repo import CartProductRepository

__all__ = [
    "UserRepository",
    "ProductRepository",
    "CartProductRepository",
]
