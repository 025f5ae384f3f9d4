# app/dependencies.py
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.auth_utils import decode_access_token
from app.db.database import get_db
from app.db.functions.users import get_user_by_username
from app.db.models import RoleEnum
from app.db.schemas import User
from app.errors import AuthenticationError, PermissionDeniedError

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login", auto_error=False)


def get_current_username(token: str = Depends(oauth2_scheme)) -> str:
    """The authenticated principal: the username in the bearer token."""
    if not token:
        raise AuthenticationError("Not authenticated")
    return decode_access_token(token)


async def get_current_user(
    username: str = Depends(get_current_username),
    db: AsyncSession = Depends(get_db),
) -> User:
    user = await get_user_by_username(db, username)
    if user is None:
        raise AuthenticationError("Unknown user")
    return User.model_validate(user)


def require_admin(user: User = Depends(get_current_user)) -> User:
    if user.role != RoleEnum.admin:
        raise PermissionDeniedError()
    return user
