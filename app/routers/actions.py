# File: app/routers/actions.py
# Form-post counterparts of /api/auth for the server-rendered pages.

from fastapi import APIRouter, Depends, Form, Request
from app.core.ratelimit import limiter
from app.dependencies.auth import get_auth_service
from app.schemas.auth import ActionOut
from app.services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth-actions"])

@router.post("/login", response_model=ActionOut, response_model_exclude_none=True)
@limiter.limit("10/minute")
def login_action(
    request: Request,
    email: str = Form(default=""),
    password: str = Form(default=""),
    auth: AuthService = Depends(get_auth_service),
):
    result = auth.login(email.strip(), password)
    if not result.success:
        return {"error": result.message or "Invalid credentials"}
    return {"success": True}

@router.post("/register", response_model=ActionOut, response_model_exclude_none=True)
@limiter.limit("10/minute")
def register_action(
    request: Request,
    name: str = Form(default=""),
    email: str = Form(default=""),
    password: str = Form(default=""),
    confirmPassword: str = Form(default=""),
    auth: AuthService = Depends(get_auth_service),
):
    result = auth.register(name.strip(), email.strip(), password, confirm_password=confirmPassword)
    if not result.success:
        return {"error": result.message or "Failed to register"}
    return {"success": True}

@router.post("/logout", response_model=ActionOut, response_model_exclude_none=True)
def logout_action(auth: AuthService = Depends(get_auth_service)):
    auth.logout()
    return {"success": True}
