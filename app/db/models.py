# app/db/models.py
from enum import Enum as PyEnum

from sqlalchemy import Column, Integer, String, Boolean, Numeric, ForeignKey, Enum
from sqlalchemy.orm import relationship

from app.db.database import Base


# User roles
class RoleEnum(str, PyEnum):
    user = "user"
    admin = "admin"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(RoleEnum), default=RoleEnum.user, nullable=False)

    profile = relationship("Profile", back_populates="user", uselist=False)


class Profile(Base):
    __tablename__ = "profiles"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    first_name = Column(String(50), default="")
    last_name = Column(String(50), default="")
    phone = Column(String(20), default="")
    email = Column(String(200), default="")
    address = Column(String(200), default="")
    city = Column(String(50), default="")
    state = Column(String(2), default="")
    zip = Column(String(20), default="")

    user = relationship("User", back_populates="profile")


class Category(Base):
    __tablename__ = "categories"

    category_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False)
    description = Column(String, nullable=True)

    products = relationship("Product", back_populates="category")


class Product(Base):
    __tablename__ = "products"

    product_id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), index=True, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category_id = Column(Integer, ForeignKey("categories.category_id"), nullable=False)
    description = Column(String, nullable=True)
    color = Column(String(20), nullable=True)
    stock = Column(Integer, default=0)
    featured = Column(Boolean, default=False)
    image_url = Column(String(200), nullable=True)

    category = relationship("Category", back_populates="products")


# One row per (user, product); the composite key backs the cart upsert
class ShoppingCartItem(Base):
    __tablename__ = "shopping_cart"

    user_id = Column(Integer, ForeignKey("users.id"), primary_key=True)
    product_id = Column(Integer, ForeignKey("products.product_id", ondelete="CASCADE"), primary_key=True)
    quantity = Column(Integer, nullable=False, default=1)
