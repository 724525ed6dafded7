from typing import Optional
from fastapi import Depends, Header
from sqlalchemy.orm import Session

from .tokens import authenticate
from ..core.exceptions import NotAuthenticatedError
from ..database import get_db
from ..database.models import User
from ..core.logger import logger


def get_current_user_id(authorization: Optional[str] = Header(None)) -> int:
    return authenticate(authorization)


def get_current_user(
    user_id: int = Depends(get_current_user_id),
    db: Session = Depends(get_db),
) -> User:
    user = db.get(User, user_id)
    if user is None:
        logger.warning(f"Token refers to unknown user id: {user_id}")
        raise NotAuthenticatedError("User not found")
    return user
