# app/core/security.py
import logging
import time, jwt
from typing import Optional
from passlib.hash import bcrypt_sha256
from pydantic import ValidationError as PydanticValidationError
from app.core.config import settings
from app.schemas.user import SessionUser

ALGO = "HS256"
SESSION_TTL = 30 * 24 * 3600

logger = logging.getLogger(__name__)

def hash_password(raw: str) -> str:
    return bcrypt_sha256.hash(raw)

def verify_password(raw: str, hashed: Optional[str]) -> bool:
    if not hashed:
        return False
    try:
        return bcrypt_sha256.verify(raw, hashed)
    except (ValueError, TypeError):
        # malformed digest
        return False

def make_session_token(user: SessionUser, ttl: int = SESSION_TTL) -> str:
    now = int(time.time())
    payload = {
        "sub": user.id,
        "email": user.email,
        "name": user.name,
        "iat": now,
        "exp": now + ttl,
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=ALGO)

def verify_session_token(token: Optional[str]) -> Optional[SessionUser]:
    """Decode a session token; None for anything forged, malformed or expired."""
    if not token:
        return None
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[ALGO],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError:
        logger.info("Session token expired")
        return None
    except jwt.PyJWTError as e:
        logger.warning(f"Token verification error: {e}")
        return None
    try:
        return SessionUser(id=payload["sub"], email=payload["email"], name=payload.get("name"))
    except (KeyError, PydanticValidationError):
        logger.warning("Token verification error: incomplete claims")
        return None
