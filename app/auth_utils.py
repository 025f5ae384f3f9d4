# app/auth_utils.py
import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone

import jwt

from app import config
from app.errors import AuthenticationError


def hash_password(password: str, salt: str = None) -> str:
    """Hash a password with SHA-256 and a random salt, stored as ``salt$digest``."""
    salt = salt or secrets.token_hex(16)
    digest = hashlib.sha256((salt + password).encode()).hexdigest()
    return f"{salt}${digest}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Check a password against a stored ``salt$digest``."""
    salt, _, _ = hashed_password.partition("$")
    return hmac.compare_digest(hash_password(plain_password, salt), hashed_password)


def create_access_token(data: dict, expires_delta: timedelta = None) -> str:
    """Create a JWT with an expiry."""
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_access_token(token: str) -> str:
    """Return the username (``sub``) carried by the token."""
    try:
        payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    except jwt.ExpiredSignatureError:
        raise AuthenticationError("Token has expired")
    except jwt.InvalidTokenError:
        raise AuthenticationError("Invalid token")

    username = payload.get("sub")
    if not username:
        raise AuthenticationError("Invalid token")
    return username
