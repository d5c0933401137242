"""Product Repository - Product aggregate operations."""
from typing import Any

from postgrest.exceptions import APIError

from core.db import Functions, Tables
from core.errors import ProductNameDuplicationError
from core.services.models import Product

from .base import BaseRepository, is_unique_violation

# Embedded selects pull the whole aggregate in one round trip
PRODUCT_DETAIL_COLUMNS = (
    "*, keywords(id, name), images(id, url, position), "
    "options(id, name, price, parent_id, position)"
)
PRODUCT_LIST_COLUMNS = (
    "id, name, original_price, discounted_price, category, images(id, url, position)"
)


class ProductRepository(BaseRepository):
    """Product database operations."""

    async def get_all(self) -> list[Product]:
        """Get all products with their images, ordered by id."""
        result = await (
            self.client.table(Tables.PRODUCTS).select(PRODUCT_LIST_COLUMNS).order("id").execute()
        )
        return [Product.from_row(p) for p in result.data]

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product aggregate by ID."""
        result = await (
            self.client.table(Tables.PRODUCTS)
            .select(PRODUCT_DETAIL_COLUMNS)
            .eq("id", product_id)
            .execute()
        )
        return Product.from_row(result.data[0]) if result.data else None

    async def exists_by_name(self, name: str) -> bool:
        """Check whether a product name is taken without loading the row."""
        result = await (
            self.client.table(Tables.PRODUCTS)
            .select("id", count="exact")
            .eq("name", name)
            .limit(1)
            .execute()
        )
        return bool(result.count)

    async def save(
        self,
        product: dict[str, Any],
        keywords: list[str],
        images: list[str],
        options: list[dict[str, Any]],
    ) -> int:
        """Insert product, keywords, images and options in one transaction.

        ``options`` are flat rows from OptionTree.to_rows(). Returns the new
        product id.
        """
        params = {
            "p_product": product,
            "p_keywords": keywords,
            "p_images": images,
            "p_options": options,
        }
        try:
            result = await self.client.rpc(Functions.CREATE_PRODUCT, params).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise ProductNameDuplicationError(product["name"]) from e
            raise
        return int(result.data)
