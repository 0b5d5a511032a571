#built-in Pydantic type that validates email format automatically.
from pydantic import BaseModel, EmailStr, Field, field_validator
#allows fields to be None
from typing import Optional
from .user import UserResponse

#Represents the request body for user registration.
#passwords are taken verbatim; only the other fields are trimmed
class RegisterRequest(BaseModel):
    username: str = Field(min_length=3, max_length=50, pattern=r"^[A-Za-z0-9_]+$")
    email: EmailStr
    password: str = Field(min_length=6, max_length=128)
    full_name: Optional[str] = Field(default=None, max_length=100)

    @field_validator("username", "email", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("email")
    @classmethod
    def normalize_email(cls, v):
        return v.lower()

    @field_validator("full_name", mode="before")
    @classmethod
    def blank_full_name(cls, v):
        if isinstance(v, str):
            return v.strip() or None
        return v

#Represents the request body for user login
class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("username", mode="before")
    @classmethod
    def strip_username(cls, v):
        return v.strip() if isinstance(v, str) else v

#Returned by register and login
class AuthResponse(BaseModel):
    success: bool
    token: Optional[str] = None
    user: Optional[UserResponse] = None
    message: str


    #Invalid emails, usernames or missing required fields are rejected before hitting the database.
    #The role is never part of the registration body: new accounts are always Sales Executives.
