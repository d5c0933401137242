"""
Database Module - Supabase Client

Provides the singleton async Supabase client used by all repositories.
Tables, unique constraints and the rpc() functions live in
db/schema.sql.
"""

import os
from typing import Optional

from supabase._async.client import AsyncClient, create_client as acreate_client


# Environment variables
SUPABASE_URL = os.environ.get("SUPABASE_URL", "")
SUPABASE_SERVICE_ROLE_KEY = os.environ.get("SUPABASE_SERVICE_ROLE_KEY", "")


# Singleton instance
_async_supabase_client: Optional[AsyncClient] = None


async def get_supabase() -> AsyncClient:
    """
    Get async Supabase client (singleton).
    """
    global _async_supabase_client

    if _async_supabase_client is None:
        if not SUPABASE_URL or not SUPABASE_SERVICE_ROLE_KEY:
            raise ValueError("SUPABASE_URL and SUPABASE_SERVICE_ROLE_KEY must be set")
        _async_supabase_client = await acreate_client(SUPABASE_URL, SUPABASE_SERVICE_ROLE_KEY)

    return _async_supabase_client


class Tables:
    """Table names used by the repositories."""

    USERS = "users"
    PRODUCTS = "products"
    CART_PRODUCTS = "cart_products"


class Functions:
    """Database functions called through rpc()."""

    # Inserts product + keywords + images + options in one transaction
    CREATE_PRODUCT = "create_product"
    # Inserts a cart row or adds to its quantity in one statement
    ADD_CART_PRODUCT = "add_cart_product"


# PostgreSQL error code for unique constraint violations
UNIQUE_VIOLATION = "23505"
