# File: app/services/auth.py
import logging
import re
from dataclasses import dataclass
from enum import Enum
from functools import lru_cache
from typing import Callable, Optional

from app.core.config import settings
from app.core.errors import (
    AppError,
    Conflict,
    InvalidCredentials,
    LoginRequired,
    Unauthorized,
    ValidationError,
)
from app.core.security import (
    hash_password,
    make_session_token,
    verify_password,
    verify_session_token,
)
from app.repositories.user_repository import UserRepository
from app.schemas.user import SessionUser, UserOut
from app.services.session_store import SessionStore

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 512
MAX_NAME_LENGTH = 120
MAX_EMAIL_LENGTH = 255


@lru_cache(maxsize=1)
def _dummy_digest() -> str:
    # checked against when the email is unknown, so both misses cost one hash
    return hash_password("not-a-real-password")


class AuthState(Enum):
    anonymous = "anonymous"
    authenticating = "authenticating"
    authenticated = "authenticated"
    rejected = "rejected"


@dataclass
class AuthResult:
    success: bool
    user: Optional[UserOut] = None
    message: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> dict:
        out = {"success": self.success}
        if self.user is not None:
            out["user"] = {"id": self.user.id, "email": self.user.email, "name": self.user.name}
        if self.message:
            out["message"] = self.message
        return out


def is_valid_email(email: str) -> bool:
    return bool(EMAIL_RE.match(email or ""))


class AuthService:
    """Login, registration, logout and the request guards built on the session cookie."""

    def __init__(self, users: UserRepository, session: SessionStore):
        self.users = users
        self.session = session
        self.state = AuthState.anonymous

    # -------- actions --------

    def register(
        self, name: str, email: str, password: str, confirm_password: Optional[str] = None
    ) -> AuthResult:
        def _register() -> UserOut:
            self._validate_registration(name, email, password, confirm_password)
            if self.users.find_by_email(email):
                raise Conflict()
            user = self.users.create(name, email, hash_password(password))
            self._start_session(user)
            return user

        return self._run(_register, "An error occurred during registration")

    def login(self, email: str, password: str) -> AuthResult:
        def _login() -> UserOut:
            if not email or not password:
                raise ValidationError("Email and password are required")
            if not is_valid_email(email):
                raise ValidationError("Please enter a valid email address")
            if len(password) > MAX_PASSWORD_LENGTH:
                raise InvalidCredentials()
            creds = self.users.find_by_email(email, include_password=True)
            # same message for unknown email and wrong password
            if not creds:
                verify_password(password, _dummy_digest())
                raise InvalidCredentials()
            if not verify_password(password, creds.password):
                raise InvalidCredentials()
            user = UserOut.model_validate(creds.model_dump(exclude={"password"}))
            self._start_session(user)
            return user

        return self._run(_login, "An error occurred during login")

    def logout(self) -> None:
        self.session.clear()
        self.state = AuthState.anonymous

    # -------- guards --------

    def get_current_user(self) -> Optional[SessionUser]:
        try:
            user = verify_session_token(self.session.read())
        except Exception as e:
            logger.error(f"Session retrieval error: {e}", exc_info=True)
            user = None
        self.state = AuthState.authenticated if user else AuthState.anonymous
        return user

    def is_authenticated(self) -> bool:
        return self.get_current_user() is not None

    def require_auth(self) -> SessionUser:
        user = self.get_current_user()
        if not user:
            raise LoginRequired(settings.login_path)
        return user

    def require_admin(self) -> bool:
        # presence of the marker cookie only; it is not a signed token
        if not self.session.has_admin_marker():
            raise Unauthorized()
        return True

    # -------- internals --------

    def _validate_registration(self, name, email, password, confirm_password):
        if not name or not email or not password or confirm_password == "":
            raise ValidationError("All fields are required")
        if len(name) > MAX_NAME_LENGTH:
            raise ValidationError(f"Name must be at most {MAX_NAME_LENGTH} characters long")
        if len(email) > MAX_EMAIL_LENGTH or not is_valid_email(email):
            raise ValidationError("Please enter a valid email address")
        if confirm_password is not None and password != confirm_password:
            raise ValidationError("Passwords do not match")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")
        if len(password) > MAX_PASSWORD_LENGTH:
            raise ValidationError(f"Password must be at most {MAX_PASSWORD_LENGTH} characters long")

    def _start_session(self, user: UserOut) -> None:
        token = make_session_token(SessionUser(id=user.id, email=user.email, name=user.name))
        self.session.write(token)
        self.state = AuthState.authenticated

    def _run(self, action: Callable[[], UserOut], failure_message: str) -> AuthResult:
        self.state = AuthState.authenticating
        try:
            user = action()
        except AppError as e:
            self.state = AuthState.rejected
            if e.code == "store_failure":
                return AuthResult(success=False, message=failure_message, error=e.code)
            return AuthResult(success=False, message=e.message, error=e.code)
        except Exception as e:
            self.state = AuthState.rejected
            logger.error(f"Authentication error: {e}", exc_info=True)
            return AuthResult(success=False, message=failure_message, error="store_failure")
        return AuthResult(success=True, user=user)
