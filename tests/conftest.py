# tests/conftest.py
import os

# Must be set before the app modules build their engine
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test_secret_key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import NullPool

from app.auth_utils import create_access_token, hash_password
from app.db import models
from app.db.database import Base, get_db
from app.main import app

PASSWORD = "password"


def seed(session: Session):
    """Two users with empty profiles, one without a profile, a category and three products."""
    session.add_all([
        models.User(id=1, username="user", hashed_password=hash_password(PASSWORD), role=models.RoleEnum.user),
        models.User(id=2, username="admin", hashed_password=hash_password(PASSWORD), role=models.RoleEnum.admin),
        models.User(id=3, username="noprofile", hashed_password=hash_password(PASSWORD), role=models.RoleEnum.user),
    ])
    session.add_all([
        models.Profile(user_id=1, first_name="Joe", last_name="Joseph", phone="800-555-1234",
                       email="joejoseph@email.com", address="789 Oak Avenue", city="Dallas",
                       state="TX", zip="75051"),
        models.Profile(user_id=2, first_name="Adam", last_name="Admamson"),
    ])
    session.add(models.Category(category_id=1, name="Electronics", description="Gadgets and devices"))
    session.add_all([
        models.Product(product_id=1, name="Smartphone", price=499.99, category_id=1, stock=50),
        models.Product(product_id=2, name="Laptop", price=899.99, category_id=1, stock=30),
        models.Product(product_id=5, name="Headphones", price=99.50, category_id=1, stock=100),
    ])
    session.commit()


@pytest.fixture
def database_path(tmp_path):
    path = tmp_path / "storefront.db"
    engine = create_engine(f"sqlite:///{path}")
    Base.metadata.create_all(engine)
    with Session(engine) as session:
        seed(session)
    engine.dispose()
    return path


@pytest.fixture
async def db_session(database_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{database_path}", poolclass=NullPool)
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session
    await engine.dispose()


@pytest.fixture
def session_factory(database_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{database_path}", poolclass=NullPool)
    return sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def test_client(session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth_headers(username: str) -> dict:
    token = create_access_token({"sub": username})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers():
    return auth_headers("user")


@pytest.fixture
def admin_headers():
    return auth_headers("admin")
