from fastapi import APIRouter, Depends

from ..auth.dependencies import get_current_user
from ..database.models import User
from ..dependencies.auth_dependencies import get_auth_service
from ..dto.auth import AuthResponse, LoginRequest, RegisterRequest
from ..dto.user import UserDto
from ..services.auth_service import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=AuthResponse)
def register(
    payload: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    token, user = auth_service.register_user(
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
    )
    return AuthResponse(token=token, user=UserDto.from_user(user))


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    token, user = auth_service.login_user(email=payload.email, password=payload.password)
    return AuthResponse(token=token, user=UserDto.from_user(user))


@router.get("/me", response_model=UserDto)
def me(current_user: User = Depends(get_current_user)):
    return UserDto.from_user(current_user)
