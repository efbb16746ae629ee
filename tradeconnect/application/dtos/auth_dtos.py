"""Auth DTOs for API layer"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator

from ...domain.enums import UserRole


class RegisterUserDto(BaseModel):
    """DTO for user registration"""
    email: EmailStr
    password: str = Field(min_length=6)
    role: UserRole = UserRole.BUYER

    @field_validator("role")
    @classmethod
    def role_must_be_self_service(cls, value: UserRole) -> UserRole:
        if value == UserRole.ADMIN:
            raise ValueError("Administrators cannot self-register")
        return value


class LoginUserDto(BaseModel):
    """DTO for user login"""
    email: EmailStr
    password: str


class EmailDto(BaseModel):
    """DTO for forgot password and resend verification requests"""
    email: EmailStr


class ResetPasswordDto(BaseModel):
    token: str
    password: str = Field(min_length=6)


class UserDto(BaseModel):
    """DTO for user response"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: UserRole
    approved: bool
    email_verified: bool
    created_at: datetime


class RegisterResponse(BaseModel):
    message: str
    user: UserDto
    email_status: str
    email_error: Optional[str] = None


class LoginResponse(BaseModel):
    message: str = "Login successful"
    user: UserDto


class MessageResponse(BaseModel):
    message: str
    success: bool = True
