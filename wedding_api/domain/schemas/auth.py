"""Pydantic schemas for User and Auth."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)
    role: Optional[str] = None

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("email is required")
        return value


class LoginRequest(BaseModel):
    email: str = Field(min_length=1)
    password: str = Field(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value: str) -> str:
        value = value.strip().lower()
        if not value:
            raise ValueError("email is required")
        return value


class GoogleSignInRequest(BaseModel):
    id_token: str = Field(alias="idToken", min_length=1)

    model_config = ConfigDict(populate_by_name=True)


class UserRead(BaseModel):
    id: int
    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None
    auth_id: Optional[str] = None
    created_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class AuthResponse(BaseModel):
    user: UserRead
    token: str


@dataclass(frozen=True)
class Identity:
    """The authenticated caller, resolved from a verified token."""

    user_id: int
    role: Optional[str] = None


@dataclass(frozen=True)
class FederatedIdentity:
    """Claims taken from a verified third-party identity assertion."""

    provider: str
    subject: str
    email: Optional[str] = None
    name: Optional[str] = None
