import re
from pydantic import BaseModel, EmailStr, field_validator, model_validator
from typing import Optional
from uuid import UUID
from shared.wrappers.empty_string_model_wrapper import EmptyStringModel
from ..schemas.userschema import RoleOut, UserResponse

MIN_PASSWORD_LENGTH = 8


def check_password_strength(value: str) -> str:
    if len(value) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    if not re.search(r"[A-Z]", value):
        raise ValueError("Password must contain an uppercase letter")
    if not re.search(r"[a-z]", value):
        raise ValueError("Password must contain a lowercase letter")
    if not re.search(r"\d", value):
        raise ValueError("Password must contain a number")
    return value


# -------- Email & Password --------


class SignInRequest(BaseModel):
    email: EmailStr
    password: str


class SignUpRequest(BaseModel):
    email: EmailStr
    password: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None

    @field_validator("password")
    def password_length(cls, v):
        if len(v) < MIN_PASSWORD_LENGTH:
            raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
        return v


class RefreshRequest(BaseModel):
    refresh_token: str


class SignOutRequest(BaseModel):
    refresh_token: Optional[str] = None


# -------- Password recovery --------


class ForgotPasswordRequest(BaseModel):
    email: EmailStr


class ResetPasswordRequest(BaseModel):
    token: str
    password: str
    confirm_password: str

    @field_validator("password")
    def strong_password(cls, v):
        return check_password_strength(v)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.password != self.confirm_password:
            raise ValueError("Passwords do not match")
        return self


# -------Common----------


class TokenSuccessResponse(EmptyStringModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class SessionResponse(EmptyStringModel):
    user: UserResponse
    role: Optional[RoleOut] = None
    customer_id: Optional[UUID] = None
    is_admin: bool = False
    is_customer: bool = False
    redirect_to: str


class AuthenticationResponse(SessionResponse):
    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"


class MessageResponse(BaseModel):
    message: str
