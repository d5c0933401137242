"""
Tests for ProductService
"""

import pytest
from unittest.mock import AsyncMock

from core.errors import ProductNameDuplicationError, ProductNotFoundError
from core.models import ProductCreateData
from core.services.domains import ProductService
from core.services.models import Category, Image, Product


def _product(id: int, name: str) -> Product:
    return Product(
        id=id,
        name=name,
        original_price=50000,
        discounted_price=40000,
        description="가죽 지갑입니다.",
        category=Category.WALLET,
        images=[Image(id=id, url="url1")],
    )


def _create_data(name: str) -> ProductCreateData:
    return ProductCreateData(
        name=name,
        original_price=50000,
        discounted_price=4000,
        description="가죽 지갑입니다.",
        category=Category.WALLET,
        keywords=["가죽", "지갑"],
        images=["url1", "url2"],
        options=[{"name": "색상", "children": [{"name": "검정"}]}],
    )


@pytest.fixture
def repo():
    return AsyncMock()


@pytest.fixture
def service(repo):
    return ProductService(repo)


class TestGetProducts:
    """Tests for get_products."""

    @pytest.mark.asyncio
    async def test_returns_all_products(self, service, repo):
        repo.get_all.return_value = [_product(1, "상품1"), _product(2, "상품2")]

        products = await service.get_products()

        assert [p.name for p in products] == ["상품1", "상품2"]
        assert products[0].image_url == "url1"

    @pytest.mark.asyncio
    async def test_empty_store_returns_empty_list(self, service, repo):
        repo.get_all.return_value = []

        assert await service.get_products() == []


class TestGetProduct:
    """Tests for get_product."""

    @pytest.mark.asyncio
    async def test_returns_found_product(self, service, repo, sample_product_row):
        stored = Product.from_row(sample_product_row)
        repo.get_by_id.return_value = stored

        detail = await service.get_product(1)

        assert detail.name == stored.name
        assert detail.original_price == stored.original_price
        assert detail.discounted_price == stored.discounted_price
        assert detail.description == stored.description
        assert detail.category == stored.category
        assert detail.keywords == stored.keywords
        assert detail.images == stored.images
        assert detail.options == stored.options

    @pytest.mark.asyncio
    async def test_unknown_id_raises_with_id(self, service, repo):
        repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFoundError) as exc_info:
            await service.get_product(9999)

        assert exc_info.value.product_id == 9999


class TestCreateProduct:
    """Tests for create_product."""

    @pytest.mark.asyncio
    async def test_saves_aggregate(self, service, repo):
        repo.exists_by_name.return_value = False
        repo.save.return_value = 1

        product_id = await service.create_product(_create_data("만두 지갑"))

        assert product_id == 1
        repo.exists_by_name.assert_awaited_once_with("만두 지갑")
        kwargs = repo.save.await_args.kwargs
        assert kwargs["product"]["category"] == "WALLET"
        assert kwargs["keywords"] == ["가죽", "지갑"]
        assert kwargs["images"] == ["url1", "url2"]
        assert [o["name"] for o in kwargs["options"]] == ["색상", "검정"]
        assert kwargs["options"][1]["parent_ref"] == kwargs["options"][0]["ref"]

    @pytest.mark.asyncio
    async def test_duplicated_name_raises_without_write(self, service, repo):
        repo.exists_by_name.return_value = True

        with pytest.raises(ProductNameDuplicationError):
            await service.create_product(_create_data("만두 지갑"))

        repo.save.assert_not_awaited()
        repo.get_all.assert_not_awaited()
