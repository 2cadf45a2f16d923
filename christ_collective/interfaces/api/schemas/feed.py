"""Schemas for posts, campaigns, ministries and chats."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    content: str = Field(..., min_length=1)


class PostRead(BaseModel):
    id: int
    user_id: int
    ministry_id: int | None = None
    title: str
    content: str
    created_at: datetime | None = None

    model_config = ConfigDict(from_attributes=True)


class CampaignCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)


class CampaignRead(BaseModel):
    id: int
    user_id: int
    title: str
    slug: str
    is_active: bool

    model_config = ConfigDict(from_attributes=True)


class MinistryCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=150)
    logo: str | None = Field(default=None, max_length=500)


class MinistryRead(BaseModel):
    id: int
    user_id: int
    name: str
    logo: str | None = None

    model_config = ConfigDict(from_attributes=True)


class MinistryPostRead(BaseModel):
    post: PostRead
    notified: int = Field(..., ge=0)


class MinistryEventCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    start_date: datetime


class MinistryEventRead(BaseModel):
    id: int
    ministry_id: int
    title: str
    start_date: datetime

    model_config = ConfigDict(from_attributes=True)


class ChatCreate(BaseModel):
    other_user_id: int = Field(..., ge=1)


class ChatRead(BaseModel):
    id: int
    user_a_id: int
    user_b_id: int

    model_config = ConfigDict(from_attributes=True)


__all__ = [
    "CampaignCreate",
    "CampaignRead",
    "ChatCreate",
    "ChatRead",
    "MinistryCreate",
    "MinistryEventCreate",
    "MinistryEventRead",
    "MinistryPostRead",
    "MinistryRead",
    "PostCreate",
    "PostRead",
]
