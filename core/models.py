"""
Pydantic Models - API Request/Response Schemas

Contains the projections services return and the bodies routers accept:
- Product list/detail projections and the creation body
- User registration/update bodies and the profile projection
- Session (login) and cart bodies
"""

from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator, model_validator

from core.services.models import (
    CartProduct,
    Category,
    Image,
    Keyword,
    Option,
    Product,
    User,
)

# Shown instead of the stored hash in profile responses
PASSWORD_PLACEHOLDER = "********"


def _not_blank(value: str) -> str:
    if not value or not value.strip():
        raise ValueError("must not be blank")
    return value.strip()


# ============================================================
# Products
# ============================================================

class OptionCreateData(BaseModel):
    """Option in a creation body; children nest arbitrarily deep."""
    name: str
    price: Optional[int] = Field(None, ge=0)
    children: list["OptionCreateData"] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _not_blank(v)

    def to_option(self) -> Option:
        return Option(
            name=self.name,
            price=self.price,
            children=[c.to_option() for c in self.children],
        )


class ProductCreateData(BaseModel):
    """Body of POST /api/products."""
    name: str
    original_price: int = Field(..., ge=0)
    discounted_price: int = Field(..., ge=0)
    description: Optional[str] = None
    category: Category
    keywords: list[str] = []
    images: list[str] = []
    options: list[OptionCreateData] = []

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _not_blank(v)

    @field_validator("keywords")
    @classmethod
    def unique_keywords(cls, v: list[str]) -> list[str]:
        labels = [_not_blank(k) for k in v]
        return list(dict.fromkeys(labels))

    @model_validator(mode="after")
    def check_prices(self) -> "ProductCreateData":
        if self.discounted_price > self.original_price:
            raise ValueError("discounted_price must not exceed original_price")
        return self


class ProductData(BaseModel):
    """Product list item."""
    id: int
    name: str
    original_price: int
    discounted_price: int
    image_url: Optional[str] = None

    @classmethod
    def of(cls, product: Product) -> "ProductData":
        return cls(
            id=product.id,
            name=product.name,
            original_price=product.original_price,
            discounted_price=product.discounted_price,
            image_url=product.representative_image_url,
        )


class ProductDetailData(BaseModel):
    """Full product view."""
    id: int
    name: str
    original_price: int
    discounted_price: int
    description: Optional[str] = None
    category: Category
    keywords: list[Keyword] = []
    images: list[Image] = []
    options: list[Option] = []

    @classmethod
    def of(cls, product: Product) -> "ProductDetailData":
        return cls(
            id=product.id,
            name=product.name,
            original_price=product.original_price,
            discounted_price=product.discounted_price,
            description=product.description,
            category=product.category,
            keywords=product.keywords,
            images=product.images,
            options=product.options,
        )


# ============================================================
# Users
# ============================================================

class UserRegisterData(BaseModel):
    """Body of POST /api/users."""
    email: EmailStr
    name: str
    password: str = Field(..., min_length=4, max_length=72)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class UserUpdateData(BaseModel):
    """Body of PATCH /api/users/me. Only the name is mutable."""
    name: str

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        return _not_blank(v)


class UserResponseData(BaseModel):
    """Profile of the current user."""
    id: int
    email: str
    name: str
    password: str = PASSWORD_PLACEHOLDER

    @classmethod
    def of(cls, user: User) -> "UserResponseData":
        return cls(id=user.id, email=user.email, name=user.name)


# ============================================================
# Session
# ============================================================

class SessionRequestData(BaseModel):
    """Body of POST /api/session."""
    email: EmailStr
    password: str = Field(..., min_length=1)


class SessionResponseData(BaseModel):
    access_token: str
    token_type: str = "bearer"


# ============================================================
# Cart
# ============================================================

class CartProductCreateData(BaseModel):
    """Body of POST /api/carts."""
    product_id: int
    option_id: Optional[int] = None
    quantity: int = Field(1, ge=1)


class CartProductData(BaseModel):
    """Cart row as returned to its owner."""
    id: int
    product_id: int
    option_id: Optional[int] = None
    quantity: int

    @classmethod
    def of(cls, cart_product: CartProduct) -> "CartProductData":
        return cls(
            id=cart_product.id,
            product_id=cart_product.product_id,
            option_id=cart_product.option_id,
            quantity=cart_product.quantity,
        )
