#schemas for registration/login, user output and customer records
from .user import UserResponse, UserProfile, ProfileResponse, UserListResponse, MessageResponse
from .auth import LoginRequest, RegisterRequest, AuthResponse
from .customer import (
    CustomerCreate, CustomerUpdate, CustomerResponse, CustomerEnvelope,
    CustomerListResponse, AreasResponse,
)

#defines what gets exported when someone imports from this module
__all__ = [
    "UserResponse", "UserProfile", "ProfileResponse", "UserListResponse", "MessageResponse",
    "LoginRequest", "RegisterRequest", "AuthResponse",
    "CustomerCreate", "CustomerUpdate", "CustomerResponse", "CustomerEnvelope",
    "CustomerListResponse", "AreasResponse",
]
