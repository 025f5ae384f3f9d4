# app/db/database.py
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from app import config


def engine_options(database_url: str) -> dict:
    """Pool and timeout options for the given URL."""
    options = {"echo": config.DB_ECHO}
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return options

    options.update(
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_pre_ping=True,
    )
    if url.get_driver_name() == "asyncpg":
        options["connect_args"] = {"command_timeout": config.DB_COMMAND_TIMEOUT}
    return options


# Async engine
engine = create_async_engine(config.DATABASE_URL, **engine_options(config.DATABASE_URL))

# Async session factory
SessionLocal = sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)

# Base class for models
Base = declarative_base()


# One session per request; the connection goes back to the pool on every exit path
async def get_db():
    async with SessionLocal() as session:
        yield session
