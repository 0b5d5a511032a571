from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime
from ..models.user import UserRole #role-based access control

#API output schema
#never carries the password hash
class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    email: str
    full_name: Optional[str] = None
    role: UserRole

#profile view adds the account timestamps
class UserProfile(UserResponse):
    is_active: bool
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None

class ProfileResponse(BaseModel):
    success: bool = True
    data: UserProfile

class UserListResponse(BaseModel):
    success: bool = True
    data: List[UserProfile]
    count: int

class MessageResponse(BaseModel):
    success: bool
    message: str

    #keeps authentication output separate from the stored user row, so sensitive columns cannot leak into responses.
