from ..auth.security import get_password_hash, validate_password, verify_password
from ..auth.validators import normalize_and_validated_email
from ..core.exceptions import DuplicateEmailError, InvalidPasswordError, ValidationError
from ..core.logger import logger
from ..database.models import User
from ..database.repositories.user_repository import UserRepository
from .auth_service import check_profile_fields


class UserService:
    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def update_profile(self, user: User, first_name: str, last_name: str, email: str) -> User:
        normalized_email = normalize_and_validated_email(email)
        if not normalized_email:
            raise ValidationError("Invalid email format")
        check_profile_fields(first_name, last_name)

        if normalized_email != user.email and self.user_repo.email_exists(normalized_email):
            raise DuplicateEmailError(f"Email {normalized_email} is already taken")

        user.first_name = first_name.strip()
        user.last_name = last_name.strip()
        user.email = normalized_email
        updated = self.user_repo.save(user)
        logger.info(f"Profile updated for user {user.id}")
        return updated

    def change_password(self, user: User, current_password: str, new_password: str) -> User:
        if not verify_password(current_password, user.hashed_password):
            logger.warning(f"Incorrect current password on change for user {user.id}")
            raise InvalidPasswordError("Current password is incorrect")

        is_valid, message = validate_password(new_password)
        if not is_valid:
            raise ValidationError(message)

        user.hashed_password = get_password_hash(new_password)
        updated = self.user_repo.save(user)
        logger.info(f"Password changed for user {user.id}")
        return updated
