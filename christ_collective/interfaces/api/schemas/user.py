"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=8)
    profile_image_url: str | None = Field(default=None, max_length=500)


class UserProfileUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=100)
    profile_image_url: str | None = Field(default=None, max_length=500)

    model_config = ConfigDict(extra="forbid")


class UserRead(BaseModel):
    id: int
    name: str
    email: EmailStr
    profile_image_url: str | None
    is_active: bool
    created_at: datetime | None

    model_config = ConfigDict(from_attributes=True)
