#app\schemas\user.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel

class UserOut(BaseModel):
    id: str
    email: str
    name: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True

class UserCredentials(UserOut):
    """Only handed out for the login check; carries the password digest."""
    password: str

class SessionUser(BaseModel):
    """Identity decoded from the session token."""
    id: str
    email: str
    name: Optional[str] = None
