# app/routers/auth.py
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth_utils import create_access_token, hash_password, verify_password
from app.db.database import get_db
from app.db.functions.users import create_user, get_user_by_username
from app.db.schemas import Token, User, UserLogin, UserRegister
from app.errors import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/register", response_model=User, status_code=201)
async def register(payload: UserRegister, db: AsyncSession = Depends(get_db)):
    if payload.password != payload.confirm_password:
        raise ValidationError("Password and confirm password do not match")

    if await get_user_by_username(db, payload.username) is not None:
        raise ValidationError("User already exists")

    # self-registration always yields a plain user; create_user also adds the empty profile
    new_user = await create_user(db, payload.username, hash_password(payload.password))
    logger.info("Registered user %s", new_user.username)
    return User.model_validate(new_user)


@router.post("/login", response_model=Token)
async def login(payload: UserLogin, db: AsyncSession = Depends(get_db)):
    user = await get_user_by_username(db, payload.username)
    if user is None or not verify_password(payload.password, user.hashed_password):
        raise AuthenticationError("Invalid username or password")

    token = create_access_token({"sub": user.username, "id": user.id})
    return Token(access_token=token, user=User.model_validate(user))
