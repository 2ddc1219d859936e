"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserRegister(BaseModel):
    username: str = Field(..., min_length=3, max_length=30, pattern=r"^[A-Za-z0-9_]+$")
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    display_name: str | None = Field(default=None, max_length=100)


class UserLogin(BaseModel):
    login: str = Field(..., min_length=1, description="Username or email address")
    password: str = Field(..., min_length=1)


class ProfileUpdate(BaseModel):
    display_name: str | None = Field(default=None, max_length=100)
    bio: str | None = Field(default=None, max_length=500)
    location: str | None = Field(default=None, max_length=100)
    website: str | None = Field(default=None, max_length=255)
    profile_image_url: str | None = Field(default=None, max_length=500)
    cover_image_url: str | None = Field(default=None, max_length=500)
    genres: list[str] | None = None

    model_config = ConfigDict(extra="forbid")


class UserSummaryRead(BaseModel):
    id: int
    username: str
    display_name: str
    profile_image_url: str | None = None
    is_verified: bool = False

    model_config = ConfigDict(from_attributes=True)


class UserRead(BaseModel):
    id: int
    username: str
    display_name: str
    bio: str | None
    location: str | None
    website: str | None
    profile_image_url: str | None
    cover_image_url: str | None
    genres: list[str]
    is_verified: bool
    is_admin: bool
    is_super_admin: bool
    posts_count: int
    comments_count: int
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)


class CurrentUserRead(UserRead):
    email: EmailStr


class UserStatsRead(BaseModel):
    user_id: int
    posts_count: int
    comments_count: int
    followers_count: int
    following_count: int
    likes_received: int

    model_config = ConfigDict(from_attributes=True)


class AdminFlagUpdate(BaseModel):
    value: bool = True


__all__ = [
    "AdminFlagUpdate",
    "CurrentUserRead",
    "ProfileUpdate",
    "UserLogin",
    "UserRead",
    "UserRegister",
    "UserStatsRead",
    "UserSummaryRead",
]
