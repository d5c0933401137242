"""Cart domain service: per-user cart rows."""

from core.errors import OptionNotFoundError, ProductNotFoundError
from core.logging import get_logger, sanitize_id_for_logging
from core.models import CartProductCreateData, CartProductData
from core.services.models import Option, User
from core.services.repositories import CartProductRepository, ProductRepository

logger = get_logger(__name__)


def _option_ids(options: list[Option]) -> set[int]:
    ids: set[int] = set()
    stack = list(options)
    while stack:
        option = stack.pop()
        if option.id is not None:
            ids.add(option.id)
        stack.extend(option.children)
    return ids


class CartService:
    """
    Manages users' carts.

    Adding a product/option pair that is already in the cart increases
    the existing row's quantity instead of creating a second row. The
    increment happens in the database, not here.
    """

    def __init__(self, repo: CartProductRepository, product_repo: ProductRepository):
        self.repo = repo
        self.product_repo = product_repo

    async def get_cart_products(self, user: User) -> list[CartProductData]:
        rows = await self.repo.get_all_by_user_id(user.id)
        return [CartProductData.of(r) for r in rows]

    async def add_cart_product(self, user: User, data: CartProductCreateData) -> int:
        """Add to cart and return the id of the row holding the selection."""
        product = await self.product_repo.get_by_id(data.product_id)
        if product is None:
            raise ProductNotFoundError(data.product_id)
        if data.option_id is not None and data.option_id not in _option_ids(product.options):
            raise OptionNotFoundError(data.option_id)

        cart_product_id = await self.repo.add(
            user_id=user.id,
            product_id=data.product_id,
            option_id=data.option_id,
            quantity=data.quantity,
        )
        logger.info(
            "User %s added product %s to cart",
            sanitize_id_for_logging(user.id),
            data.product_id,
        )
        return cart_product_id
