"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, ConfigDict, Field
from datetime import datetime


class UserCreate(BaseModel):
    """Schema for user registration."""
    username: str
    email: str
    password: str


class UserLogin(BaseModel):
    """Schema for user login."""
    email: str
    password: str


class UserSummary(BaseModel):
    """Public identity returned with a token."""
    id: str
    username: str
    email: str


class AuthResponse(BaseModel):
    """Schema for register/login response."""
    token: str
    user: UserSummary


class UserResponse(BaseModel):
    """Schema for user response; never carries the password hash."""
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    username: str
    email: str
    profile_picture: str = Field("", alias="profilePicture")
    created_at: datetime = Field(alias="createdAt")


class AvatarResponse(BaseModel):
    profile_picture: str = Field(alias="profilePicture")

    model_config = ConfigDict(populate_by_name=True)
