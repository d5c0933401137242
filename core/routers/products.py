"""
Products API Router

Catalog listing and detail are public; creation is admin-only
(see core.auth.policy.ROUTE_POLICY).
"""

from fastapi import APIRouter, Depends, Response

from core.auth import AuthorizedRoute
from core.models import ProductCreateData, ProductData, ProductDetailData
from core.routers.deps import get_product_service
from core.services.domains import ProductService

router = APIRouter(prefix="/api/products", tags=["products"], route_class=AuthorizedRoute)


@router.get("", response_model=list[ProductData])
async def list_products(service: ProductService = Depends(get_product_service)):
    """All products (possibly empty)"""
    return await service.get_products()


@router.get("/{product_id}", response_model=ProductDetailData)
async def get_product(product_id: int, service: ProductService = Depends(get_product_service)):
    """Product detail; 404 if the id is unknown"""
    return await service.get_product(product_id)


@router.post("", status_code=201)
async def create_product(
    data: ProductCreateData,
    service: ProductService = Depends(get_product_service),
):
    """Create a product (admin only)"""
    product_id = await service.create_product(data)
    return Response(status_code=201, headers={"Location": f"/api/products/{product_id}"})
