# app/db/schemas.py
from decimal import Decimal
from typing import Annotated, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, computed_field

from app.db.models import RoleEnum

CENT = Decimal("0.01")

# Exact in Python, plain JSON number on the wire
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# Users and tokens
class UserRegister(BaseModel):
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)
    confirm_password: str


class UserLogin(BaseModel):
    username: str
    password: str


class User(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    username: str
    role: RoleEnum


class Token(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: User


# Profile, replaced as a whole on update
class ProfileBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    first_name: str = ""
    last_name: str = ""
    phone: str = ""
    email: str = ""
    address: str = ""
    city: str = ""
    state: str = ""
    zip: str = ""


class Profile(ProfileBase):
    user_id: int


# Categories; any client-supplied id is ignored on create
class CategoryBase(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    name: str = Field(min_length=1, max_length=50)
    description: Optional[str] = None


class Category(CategoryBase):
    category_id: int


class Product(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    product_id: int
    name: str
    price: Money
    category_id: int
    description: Optional[str] = None
    color: Optional[str] = None
    stock: int = 0
    featured: bool = False
    image_url: Optional[str] = None


# Shopping cart, rebuilt from the shopping_cart table on each read
class ShoppingCartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    product: Product
    quantity: int

    @computed_field
    @property
    def line_total(self) -> Money:
        return (self.product.price * self.quantity).quantize(CENT)


class ShoppingCart(BaseModel):
    items: Dict[int, ShoppingCartItem] = {}

    def add(self, item: ShoppingCartItem) -> None:
        self.items[item.product.product_id] = item

    def contains(self, product_id: int) -> bool:
        return product_id in self.items

    def get(self, product_id: int) -> Optional[ShoppingCartItem]:
        return self.items.get(product_id)

    @computed_field
    @property
    def total(self) -> Money:
        return sum((item.line_total for item in self.items.values()), Decimal("0")).quantize(CENT)


class QuantityUpdate(BaseModel):
    quantity: int
