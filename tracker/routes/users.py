from fastapi import APIRouter, Depends

from ..auth.dependencies import get_current_user
from ..database.models import User
from ..dependencies.auth_dependencies import get_user_service
from ..dto.base import MessageResponse
from ..dto.user import ChangePasswordRequest, UpdateProfileRequest, UserDto
from ..services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/profile", response_model=UserDto)
def get_profile(current_user: User = Depends(get_current_user)):
    return UserDto.from_user(current_user)


@router.put("/profile", response_model=UserDto)
def update_profile(
    payload: UpdateProfileRequest,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    user = user_service.update_profile(
        current_user,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
    )
    return UserDto.from_user(user)


@router.put("/change-password", response_model=MessageResponse)
def change_password(
    payload: ChangePasswordRequest,
    current_user: User = Depends(get_current_user),
    user_service: UserService = Depends(get_user_service),
):
    user_service.change_password(current_user, payload.current_password, payload.new_password)
    return MessageResponse(message="Password changed successfully")
