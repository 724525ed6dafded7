from typing import Annotated
from pydantic import EmailStr, Field, StringConstraints

from .base import CamelModel
from .user import UserDto

Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    first_name: Name
    last_name: Name


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AuthResponse(CamelModel):
    token: str
    user: UserDto
