# app/db/functions/users.py
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db.models import User, Profile, RoleEnum
from app.errors import storage_errors


async def get_user_by_username(db: AsyncSession, username: str) -> Optional[User]:
    with storage_errors("Error retrieving user"):
        result = await db.execute(select(User).filter(User.username == username))
        return result.scalar_one_or_none()


async def create_user(db: AsyncSession, username: str, hashed_password: str, role: RoleEnum = RoleEnum.user) -> User:
    """Insert the user and its empty profile in one transaction."""
    with storage_errors("Error creating user"):
        try:
            db_user = User(username=username, hashed_password=hashed_password, role=role)
            db.add(db_user)
            await db.flush()
            db.add(Profile(user_id=db_user.id))
            await db.commit()
        except SQLAlchemyError:
            await db.rollback()
            raise
        await db.refresh(db_user)
        return db_user
