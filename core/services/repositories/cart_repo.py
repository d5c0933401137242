"""Cart Repository - cart rows per user."""
from core.db import Functions, Tables
from core.services.models import CartProduct

from .base import BaseRepository


class CartProductRepository(BaseRepository):
    """Cart product database operations."""

    async def get_all_by_user_id(self, user_id: int) -> list[CartProduct]:
        """Get user's cart rows in insertion order."""
        result = await (
            self.client.table(Tables.CART_PRODUCTS)
            .select("*")
            .eq("user_id", user_id)
            .order("id")
            .execute()
        )
        return [CartProduct(**row) for row in result.data]

    async def add(
        self, user_id: int, product_id: int, option_id: int | None, quantity: int
    ) -> int:
        """Add ``quantity`` to the row holding this selection, creating it if absent.

        The insert-or-increment runs as one statement in add_cart_product(),
        so concurrent adds of the same selection never overwrite each other.
        Returns the row id.
        """
        params = {
            "p_user_id": user_id,
            "p_product_id": product_id,
            "p_option_id": option_id,
            "p_quantity": quantity,
        }
        result = await self.client.rpc(Functions.ADD_CART_PRODUCT, params).execute()
        return int(result.data)
