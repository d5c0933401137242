"""
Tests for CartService
"""

import asyncio

import pytest
from unittest.mock import AsyncMock

from core.errors import OptionNotFoundError, ProductNotFoundError
from core.models import CartProductCreateData
from core.services.domains import CartService
from core.services.models import CartProduct, Product


class InMemoryCart:
    """Cart storage whose add() is a single step, like the database upsert."""

    def __init__(self):
        self.rows: list[CartProduct] = []

    async def add(self, user_id, product_id, option_id, quantity):
        await asyncio.sleep(0)
        for row in self.rows:
            if (row.user_id, row.product_id, row.option_id) == (user_id, product_id, option_id):
                row.quantity += quantity
                return row.id
        row = CartProduct(
            id=len(self.rows) + 1,
            user_id=user_id,
            product_id=product_id,
            option_id=option_id,
            quantity=quantity,
        )
        self.rows.append(row)
        return row.id


@pytest.fixture
def repo():
    return AsyncMock()


@pytest.fixture
def product_repo(sample_product_row):
    product_repo = AsyncMock()
    product_repo.get_by_id.return_value = Product.from_row(sample_product_row)
    return product_repo


@pytest.fixture
def service(repo, product_repo):
    return CartService(repo, product_repo)


class TestGetCartProducts:
    """Tests for get_cart_products."""

    @pytest.mark.asyncio
    async def test_returns_users_rows(self, service, repo, user):
        repo.get_all_by_user_id.return_value = [
            CartProduct(id=1, user_id=1, product_id=1, quantity=2),
            CartProduct(id=2, user_id=1, product_id=1, option_id=11, quantity=1),
        ]

        rows = await service.get_cart_products(user)

        assert [r.id for r in rows] == [1, 2]
        assert rows[1].option_id == 11
        repo.get_all_by_user_id.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_empty_cart(self, service, repo, user):
        repo.get_all_by_user_id.return_value = []

        assert await service.get_cart_products(user) == []


class TestAddCartProduct:
    """Tests for add_cart_product."""

    @pytest.mark.asyncio
    async def test_adds_selection(self, service, repo, user):
        repo.add.return_value = 5

        cart_product_id = await service.add_cart_product(
            user, CartProductCreateData(product_id=1, option_id=12, quantity=2)
        )

        assert cart_product_id == 5
        repo.add.assert_awaited_once_with(user_id=1, product_id=1, option_id=12, quantity=2)

    @pytest.mark.asyncio
    async def test_concurrent_adds_accumulate(self, product_repo, user):
        repo = InMemoryCart()
        service = CartService(repo, product_repo)
        data = CartProductCreateData(product_id=1, quantity=1)

        await service.add_cart_product(user, data)
        ids = await asyncio.gather(
            service.add_cart_product(user, data),
            service.add_cart_product(user, data),
        )

        assert len(set(ids)) == 1
        assert [(r.id, r.quantity) for r in repo.rows] == [(1, 3)]

    @pytest.mark.asyncio
    async def test_unknown_product_raises(self, service, repo, product_repo, user):
        product_repo.get_by_id.return_value = None

        with pytest.raises(ProductNotFoundError):
            await service.add_cart_product(user, CartProductCreateData(product_id=9999))

        repo.add.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_option_of_other_product_raises(self, service, repo, user):
        with pytest.raises(OptionNotFoundError) as exc_info:
            await service.add_cart_product(
                user, CartProductCreateData(product_id=1, option_id=999)
            )

        assert exc_info.value.option_id == 999
        repo.add.assert_not_awaited()
