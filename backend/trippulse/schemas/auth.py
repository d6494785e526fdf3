import uuid

from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str | None = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserResponse(BaseModel):
    id: uuid.UUID
    email: str
    name: str | None
    role: str
    preferred_language: str
    preferred_currency: str

    model_config = {"from_attributes": True}


class AuthResponse(BaseModel):
    token: str
    user: UserResponse


class UserSettingsRequest(BaseModel):
    preferred_language: str | None = Field(None, min_length=2, max_length=5)
    preferred_currency: str | None = Field(None, min_length=3, max_length=3)
