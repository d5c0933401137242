"""
Cart API Router

Cart of the authenticated caller.
"""

from fastapi import APIRouter, Depends, Response

from core.auth import AuthorizedRoute, get_current_user
from core.models import CartProductCreateData, CartProductData
from core.routers.deps import get_cart_service
from core.services.domains import CartService
from core.services.models import User

router = APIRouter(prefix="/api/carts", tags=["cart"], route_class=AuthorizedRoute)


@router.get("", response_model=list[CartProductData])
async def get_cart(
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    return await service.get_cart_products(user)


@router.post("", status_code=201)
async def add_to_cart(
    data: CartProductCreateData,
    user: User = Depends(get_current_user),
    service: CartService = Depends(get_cart_service),
):
    cart_product_id = await service.add_cart_product(user, data)
    return Response(status_code=201, headers={"Location": f"/api/carts/{cart_product_id}"})
