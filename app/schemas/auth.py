# File: app/schemas/auth.py

from typing import Any, Optional
from pydantic import BaseModel, field_validator

# Field checks happen in AuthService so bad input comes back as
# {"success": false, "message": ...} instead of a 422.

def _as_text(value: Any) -> str:
    return value if isinstance(value, str) else ""

class RegisterIn(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""

    @field_validator("name", "email", "password", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return _as_text(value)

class LoginIn(BaseModel):
    email: str = ""
    password: str = ""

    @field_validator("email", "password", mode="before")
    @classmethod
    def coerce_text(cls, value):
        return _as_text(value)

class UserLite(BaseModel):
    id: str
    email: str
    name: Optional[str] = None

class AuthOut(BaseModel):
    success: bool
    user: Optional[UserLite] = None
    message: Optional[str] = None

class SessionOut(BaseModel):
    user: Optional[UserLite] = None
    isAuthenticated: bool

class ActionOut(BaseModel):
    success: Optional[bool] = None
    error: Optional[str] = None
