"""Authentication request and response schemas."""

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field, model_validator

from esg_api.schemas.common import CamelModel


class LoginRequest(CamelModel):
    username: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class RegisterRequest(CamelModel):
    username: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=100)
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    company_id: Optional[int] = None


class ChangePasswordRequest(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=6, max_length=100)
    confirm_password: str

    @model_validator(mode="after")
    def passwords_match(self) -> "ChangePasswordRequest":
        if self.new_password != self.confirm_password:
            raise ValueError("New password and confirmation must match")
        return self


class UserInfo(CamelModel):
    id: int
    username: str
    email: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    role: str
    company_id: Optional[int] = None
    company_name: Optional[str] = None
    created_at: datetime
    last_login_at: Optional[datetime] = None


class LoginResponse(CamelModel):
    token: str
    token_type: str = "Bearer"
    expires_at: datetime
    user: UserInfo
