from datetime import datetime
from typing import Annotated, Optional
from pydantic import EmailStr, Field, StringConstraints

from .base import CamelModel

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class UserDto(CamelModel):
    id: int
    email: str
    first_name: str
    last_name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user) -> "UserDto":
        return cls(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class UpdateProfileRequest(CamelModel):
    first_name: Name
    last_name: Name
    email: EmailStr


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6, max_length=128)
