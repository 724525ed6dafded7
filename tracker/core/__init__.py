from .logger import logger
from .exceptions import (
    AppException,
    ValidationError,
    DuplicateEmailError,
    InvalidPasswordError,
    NotAuthenticatedError,
    InvalidCredentialError,
    ForbiddenError,
    NotFoundError,
    UpstreamError,
)

__all__ = [
    "logger",
    "AppException",
    "ValidationError",
    "DuplicateEmailError",
    "InvalidPasswordError",
    "NotAuthenticatedError",
    "InvalidCredentialError",
    "ForbiddenError",
    "NotFoundError",
    "UpstreamError",
]
