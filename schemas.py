"""Request and response schemas for the HTTP API."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

import config


class UserCreate(BaseModel):
    """Registration payload; blank checks happen in the registration flow"""
    username: Optional[str] = Field(None, max_length=config.MAX_USERNAME_LENGTH)
    password: Optional[str] = None
    name: Optional[str] = Field(None, max_length=config.MAX_NAME_LENGTH)


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    username: str
    name: Optional[str] = None


class PostCreate(BaseModel):
    """Payload for a new post. At least one of title and url is required"""
    title: Optional[str] = Field(None, max_length=config.MAX_TITLE_LENGTH)
    author: Optional[str] = Field(None, max_length=config.MAX_AUTHOR_LENGTH)
    url: Optional[str] = Field(None, max_length=config.MAX_URL_LENGTH)
    likes: Optional[int] = Field(None, ge=0, le=config.MAX_LIKES)


class PostLikes(BaseModel):
    """Payload for updating the like counter"""
    likes: int = Field(..., ge=0, le=config.MAX_LIKES)


class OwnerOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: Optional[str] = None


class PostSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: Optional[str] = None
    author: Optional[str] = None
    url: Optional[str] = None
    likes: int


class PostOut(PostSummary):
    owner: OwnerOut


class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    name: Optional[str] = None
    posts: list[PostSummary] = []
