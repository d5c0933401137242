"""Database Models - Pydantic models for all entities."""
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class Role(str, Enum):
    """Account role checked by the route policy."""
    USER = "USER"
    ADMIN = "ADMIN"


class Category(str, Enum):
    """Product category."""
    WALLET = "WALLET"
    BAG = "BAG"
    BELT = "BELT"
    ACCESSORY = "ACCESSORY"
    ETC = "ETC"


class User(BaseModel):
    """User model."""
    id: int
    email: str
    name: str
    password: str  # bcrypt hash, never the raw password
    role: Role = Role.USER

    model_config = ConfigDict(extra="ignore")

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class Keyword(BaseModel):
    """Search keyword. Two keywords with the same name are the same keyword."""
    id: Optional[int] = None
    name: str

    model_config = ConfigDict(extra="ignore")

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Keyword):
            return self.name == other.name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.name)


class Image(BaseModel):
    """Product image; list order is display order."""
    id: Optional[int] = None
    url: str

    model_config = ConfigDict(extra="ignore")


class Option(BaseModel):
    """Selectable product option with optional nested sub-options."""
    id: Optional[int] = None
    name: str
    price: Optional[int] = None
    children: list["Option"] = []

    model_config = ConfigDict(extra="ignore")


class Product(BaseModel):
    """Product aggregate: product row plus keywords, images and option tree."""
    id: int
    name: str
    original_price: int
    discounted_price: int
    description: Optional[str] = None
    category: Category
    keywords: list[Keyword] = []
    images: list[Image] = []
    options: list[Option] = []

    model_config = ConfigDict(extra="ignore")

    @field_validator("keywords")
    @classmethod
    def unique_keywords(cls, v: list[Keyword]) -> list[Keyword]:
        # dict keeps first occurrence order
        return list(dict.fromkeys(v))

    @classmethod
    def from_row(cls, row: dict[str, Any]) -> "Product":
        """Build from a products row with embedded keywords/images/options.

        Embedded images and options carry a ``position`` column; options also
        carry ``parent_id`` and are reassembled through OptionTree.
        """
        from core.services.option_tree import OptionTree

        data = dict(row)
        images = sorted(data.pop("images", None) or [], key=lambda i: i.get("position", 0))
        option_rows = data.pop("options", None) or []
        return cls(
            **data,
            images=[Image(**i) for i in images],
            options=OptionTree.from_rows(option_rows).to_options(),
        )

    @property
    def representative_image_url(self) -> Optional[str]:
        return self.images[0].url if self.images else None


class CartProduct(BaseModel):
    """A product (and optional option) placed in a user's cart."""
    id: int
    user_id: int
    product_id: int
    option_id: Optional[int] = None
    quantity: int = 1

    model_config = ConfigDict(extra="ignore")
