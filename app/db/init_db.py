# app/db/init_db.py
import logging

from app.db.database import engine, Base
from app.db import models  # noqa: F401  registers tables on Base.metadata

logger = logging.getLogger(__name__)


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready")
