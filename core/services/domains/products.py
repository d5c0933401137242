"""Product domain service wrapping ProductRepository."""

from core.errors import ProductNameDuplicationError, ProductNotFoundError
from core.logging import get_logger, sanitize_string_for_logging
from core.models import ProductCreateData, ProductData, ProductDetailData
from core.services.option_tree import OptionTree
from core.services.repositories import ProductRepository

logger = get_logger(__name__)


class ProductService:
    """Product catalog operations.

    create_product() assumes the caller is an admin; the route policy
    enforces that before the service is reached.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    async def get_products(self) -> list[ProductData]:
        products = await self.repo.get_all()
        return [ProductData.of(p) for p in products]

    async def get_product(self, product_id: int) -> ProductDetailData:
        product = await self.repo.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return ProductDetailData.of(product)

    async def create_product(self, data: ProductCreateData) -> int:
        """Save a new product aggregate and return its id."""
        if await self.repo.exists_by_name(data.name):
            logger.warning(
                "Rejected duplicate product name: %s", sanitize_string_for_logging(data.name)
            )
            raise ProductNameDuplicationError(data.name)

        options = OptionTree.from_options(o.to_option() for o in data.options)
        product_id = await self.repo.save(
            product={
                "name": data.name,
                "original_price": data.original_price,
                "discounted_price": data.discounted_price,
                "description": data.description,
                "category": data.category.value,
            },
            keywords=data.keywords,
            images=data.images,
            options=options.to_rows(),
        )
        logger.info("Created product %s (%d options)", product_id, len(options))
        return product_id
