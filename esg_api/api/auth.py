"""Authentication endpoints: register, login, profile and password change."""

from fastapi import APIRouter, Depends

from esg_api.dependencies import get_auth_service, get_current_user
from esg_api.logging_config import get_logger
from esg_api.models.user import UserModel
from esg_api.schemas.auth import ChangePasswordRequest, LoginRequest, LoginResponse, RegisterRequest, UserInfo
from esg_api.schemas.common import ApiResponse
from esg_api.services.auth_service import AuthService

logger = get_logger(__name__)
router = APIRouter()


@router.post("/login", response_model=ApiResponse[LoginResponse])
def login(payload: LoginRequest, svc: AuthService = Depends(get_auth_service)) -> ApiResponse[LoginResponse]:
    logger.info("login_requested", username=payload.username)
    result = svc.login(payload.username, payload.password)
    logger.info("login_completed", user_id=result.user.id, role=result.user.role)
    return ApiResponse.ok(result, "Login successful")


@router.post("/register", response_model=ApiResponse[UserInfo], status_code=201)
def register(payload: RegisterRequest, svc: AuthService = Depends(get_auth_service)) -> ApiResponse[UserInfo]:
    logger.info("registration_requested", username=payload.username)
    user = svc.register(payload)
    logger.info("registration_completed", user_id=user.id)
    return ApiResponse.ok(user, "User registered successfully")


@router.get("/profile", response_model=ApiResponse[UserInfo])
def profile(
    user: UserModel = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
) -> ApiResponse[UserInfo]:
    return ApiResponse.ok(svc.profile(user.id), "Profile retrieved successfully")


@router.post("/change-password", response_model=ApiResponse[None])
def change_password(
    payload: ChangePasswordRequest,
    user: UserModel = Depends(get_current_user),
    svc: AuthService = Depends(get_auth_service),
) -> ApiResponse[None]:
    logger.info("password_change_requested", user_id=user.id)
    svc.change_password(user.id, payload)
    return ApiResponse.ok(None, "Password changed successfully")
