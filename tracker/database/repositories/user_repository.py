from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from ..models.user import User
from ...core.exceptions import DuplicateEmailError
from ...core.logger import logger


class UserRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_by_id(self, user_id: int) -> Optional[User]:
        return self.db.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        return self.db.query(User).filter(User.email == email).first()

    def email_exists(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def create(self, email: str, hashed_password: str, first_name: str, last_name: str) -> User:
        user = User(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name.strip(),
            last_name=last_name.strip(),
        )
        try:
            self.db.add(user)
            self.db.commit()
            self.db.refresh(user)
            logger.info(f"User created successfully: {email}")
            return user
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Email already exists: {email}")
            raise DuplicateEmailError(f"User with email {email} already exists")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error creating user {email}: {e}")
            raise

    def save(self, user: User) -> User:
        try:
            self.db.commit()
            self.db.refresh(user)
            return user
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Email already taken on update for user {user.id}")
            raise DuplicateEmailError(f"Email {user.email} is already taken")
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Error saving user {user.id}: {e}")
            raise
