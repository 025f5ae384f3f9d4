# app/errors.py
import logging
from contextlib import contextmanager
from enum import Enum

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    not_found = "not_found"
    validation = "validation"
    unauthorized = "unauthorized"
    forbidden = "forbidden"
    storage = "storage"
    internal = "internal"


STATUS_BY_KIND = {
    ErrorKind.not_found: 404,
    ErrorKind.validation: 400,
    ErrorKind.unauthorized: 401,
    ErrorKind.forbidden: 403,
    ErrorKind.storage: 500,
    ErrorKind.internal: 500,
}


class ShopError(Exception):
    """Base error. ``message`` is safe to show to the caller."""

    kind = ErrorKind.internal
    default_message = "Oops... our bad."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return STATUS_BY_KIND[self.kind]


class NotFoundError(ShopError):
    kind = ErrorKind.not_found
    default_message = "Not found"


class ValidationError(ShopError):
    kind = ErrorKind.validation
    default_message = "Invalid request"


class AuthenticationError(ShopError):
    kind = ErrorKind.unauthorized
    default_message = "Invalid token"


class PermissionDeniedError(ShopError):
    kind = ErrorKind.forbidden
    default_message = "Not enough permissions"


class StorageError(ShopError):
    kind = ErrorKind.storage
    default_message = "Storage failure"


class InternalError(ShopError):
    kind = ErrorKind.internal


@contextmanager
def storage_errors(message: str):
    """Re-raise any SQLAlchemy fault inside the block as StorageError."""
    try:
        yield
    except SQLAlchemyError as e:
        logger.error("%s: %s", message, e)
        raise StorageError(message) from e
