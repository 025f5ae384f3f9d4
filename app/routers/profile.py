# app/routers/profile.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.database import get_db
from app.db.functions.profiles import get_profile_by_user_id, update_profile
from app.db.schemas import Profile, ProfileBase, User
from app.dependencies import get_current_user
from app.errors import InternalError, NotFoundError, ShopError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/profile", tags=["profile"])


@router.get("", response_model=Profile)
async def get_profile(user: User = Depends(get_current_user), db: AsyncSession = Depends(get_db)):
    """Profile of the logged-in user."""
    try:
        profile = await get_profile_by_user_id(db, user.id)
    except ShopError:
        raise
    except Exception:
        logger.exception("Failed to load profile for user %s", user.id)
        raise InternalError()

    if profile is None:
        raise NotFoundError("Profile not found")
    return profile


@router.put("", response_model=Profile)
async def put_profile(
    profile: ProfileBase,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Replace the logged-in user's profile and return what was stored."""
    try:
        await update_profile(db, user.id, profile)
        updated = await get_profile_by_user_id(db, user.id)
    except ShopError:
        raise
    except Exception:
        logger.exception("Failed to update profile for user %s", user.id)
        raise InternalError()

    if updated is None:
        raise NotFoundError("Profile not found")
    return updated
