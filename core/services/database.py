"""
Supabase Database Service

Builds the repositories and domain services on one async Supabase client.

Usage:
    from core.services.database import get_database

    # At FastAPI startup (lifespan):
    await init_database()

    # In request context:
    db = get_database()
    products = await db.product_service.get_products()
"""

import asyncio
from typing import Optional

from supabase._async.client import AsyncClient

from core.auth.service import AuthenticationService
from core.db import get_supabase
from core.logging import get_logger
from core.services.domains import CartService, ProductService, UserService
from core.services.repositories import (
    CartProductRepository,
    ProductRepository,
    UserRepository,
)

logger = get_logger(__name__)


class Database:
    """
    Repositories and services sharing one Supabase client.

    Must be initialized via async factory method `create()` or `init_database()`.
    """

    def __init__(self, client: AsyncClient):
        """Private constructor. Use Database.create() or init_database() instead."""
        self.client = client

        self._users_repo = UserRepository(self.client)
        self._products_repo = ProductRepository(self.client)
        self._cart_repo = CartProductRepository(self.client)

        self.product_service = ProductService(self._products_repo)
        self.user_service = UserService(self._users_repo)
        self.cart_service = CartService(self._cart_repo, self._products_repo)
        self.auth_service = AuthenticationService(self._users_repo)

    @classmethod
    async def create(cls) -> "Database":
        """Async factory method: connect and wire all repositories."""
        client = await get_supabase()
        return cls(client)


# Singleton instance (initialized at startup via init_database())
_db: Database | None = None
_db_lock: Optional[asyncio.Lock] = None


def _get_lock() -> asyncio.Lock:
    """Get or create async lock for single initialization."""
    global _db_lock
    if _db_lock is None:
        _db_lock = asyncio.Lock()
    return _db_lock


async def init_database() -> Database:
    """Initialize async database singleton.

    Called at FastAPI startup (lifespan). Safe to call more than once.
    """
    global _db
    if _db is not None:
        return _db

    async with _get_lock():
        if _db is None:
            logger.info("Initializing async Supabase client...")
            _db = await Database.create()
            logger.info("Async Supabase client initialized successfully")
    return _db


async def close_database() -> None:
    """Drop the singleton. Called at FastAPI shutdown (lifespan)."""
    global _db
    _db = None
    logger.info("Database released")


def get_database() -> Database:
    """Get database instance.

    Raises:
        RuntimeError: If init_database() has not run
    """
    if _db is None:
        raise RuntimeError(
            "Database not initialized. Call 'await init_database()' at startup."
        )
    return _db
