# File: app/services/session_store.py
from typing import Optional
from fastapi import Request, Response

COOKIE_NAME = "session_token"
ADMIN_COOKIE_NAME = "admin-session"
COOKIE_MAX_AGE = 30 * 24 * 60 * 60  # 30 days

_CLEARED = object()

class SessionStore:
    """Reads and writes the session cookie for one request/response pair."""

    def __init__(self, request: Request, response: Response, secure: bool = False):
        self.request = request
        self.response = response
        self.secure = secure
        self._pending = None

    def read(self) -> Optional[str]:
        if self._pending is _CLEARED:
            return None
        if self._pending is not None:
            return self._pending
        return self.request.cookies.get(COOKIE_NAME) or None

    def write(self, token: str) -> None:
        self.response.set_cookie(
            key=COOKIE_NAME,
            value=token,
            max_age=COOKIE_MAX_AGE,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite="lax",
        )
        self._pending = token

    def clear(self) -> None:
        self.response.delete_cookie(
            key=COOKIE_NAME,
            path="/",
            secure=self.secure,
            httponly=True,
            samesite="lax",
        )
        self._pending = _CLEARED

    def has_admin_marker(self) -> bool:
        return bool(self.request.cookies.get(ADMIN_COOKIE_NAME))
