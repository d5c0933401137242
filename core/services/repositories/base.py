"""Base repository with shared Supabase client."""

from postgrest.exceptions import APIError
from supabase._async.client import AsyncClient

from core.db import UNIQUE_VIOLATION


class BaseRepository:
    """Base class for all repositories.

    All methods should use await with the client.
    """

    def __init__(self, client: AsyncClient) -> None:
        self.client = client


def is_unique_violation(error: APIError) -> bool:
    """True if PostgREST reports a unique constraint violation."""
    return str(error.code) == UNIQUE_VIOLATION
