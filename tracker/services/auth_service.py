from typing import Tuple

from ..auth.security import get_password_hash, validate_password, verify_user_password
from ..auth.tokens import issue_token
from ..auth.validators import normalize_and_validated_email, validate_name
from ..core.exceptions import DuplicateEmailError, ValidationError
from ..core.logger import logger
from ..database.models import User
from ..database.repositories.user_repository import UserRepository

INVALID_LOGIN_MESSAGE = "Invalid email or password"


def check_profile_fields(first_name: str, last_name: str) -> None:
    for value, field in ((first_name, "First name"), (last_name, "Last name")):
        is_valid, message = validate_name(value, field)
        if not is_valid:
            raise ValidationError(message)


class AuthService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def register_user(self, email: str, password: str, first_name: str, last_name: str) -> Tuple[str, User]:
        normalized_email = normalize_and_validated_email(email)
        if not normalized_email:
            raise ValidationError("Invalid email format")

        check_profile_fields(first_name, last_name)
        is_valid, message = validate_password(password)
        if not is_valid:
            raise ValidationError(message)

        if self.user_repo.email_exists(normalized_email):
            logger.warning(f"Registration with existing email: {normalized_email}")
            raise DuplicateEmailError(f"User with email {normalized_email} already exists")

        user = self.user_repo.create(
            email=normalized_email,
            hashed_password=get_password_hash(password),
            first_name=first_name,
            last_name=last_name,
        )
        logger.info(f"User registered successfully: {normalized_email}")
        return issue_token(user.id), user

    def login_user(self, email: str, password: str) -> Tuple[str, User]:
        normalized_email = normalize_and_validated_email(email)
        if not normalized_email:
            raise ValidationError(INVALID_LOGIN_MESSAGE)

        user = self.user_repo.get_by_email(normalized_email)
        if not verify_user_password(user, password):
            logger.warning(f"Failed login attempt for: {normalized_email}")
            raise ValidationError(INVALID_LOGIN_MESSAGE)

        logger.info(f"User logged in successfully: {normalized_email}")
        return issue_token(user.id), user
