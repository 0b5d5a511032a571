from fastapi import APIRouter, Depends, status
from ..schemas.auth import LoginRequest, RegisterRequest, AuthResponse
from ..schemas.user import UserResponse, UserProfile, ProfileResponse
from ..services.authenticator import Authenticator
from ..utils.auth import Claims
from ..utils.deps import get_authenticator, get_current_claims

router = APIRouter(prefix="/api/auth", tags=["authentication"])

#plain def handlers run in FastAPI's threadpool, so bcrypt never blocks the event loop
@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: RegisterRequest,
    authenticator: Authenticator = Depends(get_authenticator)
):
    """Register a new user."""
    result = authenticator.register(
        username=user_data.username,
        email=user_data.email,
        password=user_data.password,
        full_name=user_data.full_name,
    )
    #Returns user data without exposing sensitive fields
    return AuthResponse(
        success=True,
        token=result.token,
        user=UserResponse.model_validate(result.user),
        message="Registration successful",
    )

@router.post("/login", response_model=AuthResponse)
def login(
    login_data: LoginRequest,
    authenticator: Authenticator = Depends(get_authenticator)
):
    """Authenticate user and return access token."""
    result = authenticator.login(login_data.username, login_data.password)
    return AuthResponse(
        success=True,
        token=result.token,
        user=UserResponse.model_validate(result.user),
        message="Login successful",
    )

@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    claims: Claims = Depends(get_current_claims),
    authenticator: Authenticator = Depends(get_authenticator)
):
    """Get current user profile."""
    user = authenticator.profile(claims)
    return ProfileResponse(data=UserProfile.model_validate(user))
