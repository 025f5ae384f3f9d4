# app/db/functions/profiles.py
from typing import Optional

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db import models
from app.db.schemas import Profile, ProfileBase
from app.errors import storage_errors


async def get_profile_by_user_id(db: AsyncSession, user_id: int) -> Optional[Profile]:
    with storage_errors("Error retrieving profile"):
        result = await db.execute(select(models.Profile).filter(models.Profile.user_id == user_id))
        row = result.scalar_one_or_none()
    if row is None:
        return None
    return Profile.model_validate(row)


async def update_profile(db: AsyncSession, user_id: int, profile: ProfileBase) -> None:
    """Overwrite every contact field of the user's profile; no-op if it does not exist."""
    fields = {name: getattr(profile, name) for name in ProfileBase.model_fields}
    with storage_errors("Error updating profile"):
        await db.execute(
            update(models.Profile)
            .where(models.Profile.user_id == user_id)
            .values(**fields)
        )
        await db.commit()
