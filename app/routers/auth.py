# File: app/routers/auth.py

from fastapi import APIRouter, Depends, Request, Response
from app.core.ratelimit import limiter
from app.dependencies.auth import get_auth_service
from app.schemas.auth import RegisterIn, LoginIn, AuthOut, SessionOut
from app.services.auth import AuthService, AuthResult

router = APIRouter(prefix="/api/auth", tags=["auth"])

STATUS_BY_ERROR = {
    "validation_error": 400,
    "invalid_credentials": 401,
    "conflict": 409,
    "store_failure": 500,
}

def _respond(result: AuthResult, response: Response) -> dict:
    if not result.success:
        response.status_code = STATUS_BY_ERROR.get(result.error, 400)
    return result.to_dict()

@router.post("/register", response_model=AuthOut, response_model_exclude_none=True)
@limiter.limit("10/minute")
def register(request: Request, response: Response, body: RegisterIn,
             auth: AuthService = Depends(get_auth_service)):
    result = auth.register(body.name.strip(), body.email.strip(), body.password)
    return _respond(result, response)

@router.post("/login", response_model=AuthOut, response_model_exclude_none=True)
@limiter.limit("10/minute")
def login(request: Request, response: Response, body: LoginIn,
          auth: AuthService = Depends(get_auth_service)):
    result = auth.login(body.email.strip(), body.password)
    return _respond(result, response)

@router.post("/logout")
def logout(auth: AuthService = Depends(get_auth_service)):
    auth.logout()
    return {"success": True}

@router.get("/me", response_model=SessionOut)
def me(auth: AuthService = Depends(get_auth_service)):
    user = auth.get_current_user()
    return {
        "user": user.model_dump() if user else None,
        "isAuthenticated": user is not None,
    }
