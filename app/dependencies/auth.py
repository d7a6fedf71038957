# File: app/dependencies/auth.py
from fastapi import Depends, HTTPException, Request, Response, status
from sqlalchemy.orm import Session
from app.core.config import settings
from app.db.session import get_db
from app.repositories.user_repository import UserRepository
from app.schemas.user import SessionUser
from app.services.auth import AuthService
from app.services.session_store import SessionStore

def get_auth_service(request: Request, response: Response, db: Session = Depends(get_db)) -> AuthService:
    session = SessionStore(request, response, secure=settings.is_production)
    return AuthService(UserRepository(db), session)

def get_optional_user(auth: AuthService = Depends(get_auth_service)) -> SessionUser | None:
    return auth.get_current_user()

def require_user(auth: AuthService = Depends(get_auth_service)) -> SessionUser:
    """Page guard: anonymous callers are redirected to the login page."""
    return auth.require_auth()

def require_api_user(auth: AuthService = Depends(get_auth_service)) -> SessionUser:
    user = auth.get_current_user()
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    return user

def require_admin(auth: AuthService = Depends(get_auth_service)) -> bool:
    return auth.require_admin()
