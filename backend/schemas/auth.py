"""Request and response bodies for the auth endpoints."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    full_name: str | None = Field(default=None, alias="fullName")
    student_id: str | None = Field(default=None, alias="studentId")
    email: str | None = None
    phone: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_id_or_email: str | None = Field(default=None, alias="userIdOrEmail")
    password: str | None = None


class AdminLoginRequest(BaseModel):
    username: str | None = None
    password: str | None = None


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    full_name: str
    student_id: str
    email: str
    phone: str
    role: str
    created_at: datetime | None = None


class AdminResponse(BaseModel):
    id: int
    username: str
    role: str = "admin"


class RegisterResponse(BaseModel):
    message: str
    user: UserResponse


class LoginResponse(BaseModel):
    message: str
    token: str
    user: UserResponse


class AdminLoginResponse(BaseModel):
    message: str
    token: str
    admin: AdminResponse
