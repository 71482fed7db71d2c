"""Authentication routes."""

from fastapi import APIRouter, Depends, status

from petshelter.dependencies.auth import get_current_active_user
from petshelter.dependencies.permissions import get_permission_checker
from petshelter.dependencies.services import get_auth_service
from petshelter.models.user import User
from petshelter.permissions import PermissionChecker
from petshelter.schemas.auth import LoginRequest, LoginResponse, MeResponse, RegisterRequest
from petshelter.schemas.user import UserDetailResponse, UserResponse
from petshelter.services.auth_service import AuthService

router = APIRouter()


@router.post("/register", response_model=UserDetailResponse, status_code=status.HTTP_201_CREATED)
async def register(
    user_data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Register a new adopter, donor or both."""
    user = await auth_service.register_user(
        email=user_data.email,
        name=user_data.name,
        password=user_data.password,
        user_type=user_data.user_type,
    )

    return UserDetailResponse(
        success=True,
        message="User registered successfully",
        user=UserResponse.model_validate(user),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    login_data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """Exchange credentials for a bearer token."""
    user = await auth_service.authenticate_user(email=login_data.email, password=login_data.password)
    return auth_service.create_login_response(user)


@router.get("/me", response_model=MeResponse)
async def me(
    current_user: User = Depends(get_current_active_user),
    checker: PermissionChecker | None = Depends(get_permission_checker),
):
    """Current user with the permission table resolved for their role."""
    return MeResponse(
        success=True,
        user=UserResponse.model_validate(current_user),
        role=checker.role if checker else None,
        permissions=checker.policy_set.describe() if checker else None,
    )
