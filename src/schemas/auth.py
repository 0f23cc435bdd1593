"""Request and response models for the /auth endpoints."""

from typing import Optional

from pydantic import BaseModel, Field


class RegisterRequest(BaseModel):
    username: str = Field(min_length=1, max_length=64)
    password: str = Field(min_length=1, max_length=256)


class RegisterResponse(BaseModel):
    message: str = "User created"
    access_code: str


class LoginRequest(BaseModel):
    username: str
    password: str


class LoginResponse(BaseModel):
    token: str
    access_code: str


class MembershipRequest(BaseModel):
    """Body of /auth/join and /auth/leave.

    Without a name the code is only resolved and no membership changes.
    """

    code: Optional[str] = None
    name: Optional[str] = Field(default=None, max_length=64)


class JoinResponse(BaseModel):
    message: str = "Joined"
    access_code: str


class MessageResponse(BaseModel):
    message: str
