from pydantic import EmailStr, Field
from typing import Optional

from app.core.roles import Role
from app.schemas.common import CamelModel


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=8)
    name: str = Field(min_length=1)
    department: Optional[str] = None


class UserOut(CamelModel):
    id: int
    email: str
    name: str
    role: Role
    department: Optional[str] = None
    is_active: bool = True


class UserResponse(CamelModel):
    user: UserOut


class TokenResponse(CamelModel):
    user: UserOut
    access_token: str
    token_type: str = "bearer"
