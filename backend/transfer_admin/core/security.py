from datetime import datetime, timedelta, timezone
import logging
from typing import Any, Optional
import jwt
from passlib.context import CryptContext

from transfer_admin.core.config import settings

logger = logging.getLogger(__name__)

# Prefer argon2, keep bcrypt as fallback for hashes imported from the old panel
pwd_context = CryptContext(schemes=["argon2", "bcrypt"], deprecated="auto")

def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)

def dummy_verify() -> None:
    """Burn one hash verification so unknown logins take as long as wrong passwords."""
    pwd_context.dummy_verify()

def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)

def create_access_token(user_id: int, email: str, role: str, expires_delta: Optional[timedelta] = None) -> str:
    expire = datetime.now(tz=timezone.utc) + (expires_delta or timedelta(minutes=settings.access_token_expire_minutes))
    to_encode: dict[str, Any] = {
        "sub": str(user_id),
        "userId": user_id,
        "email": email,
        "role": role,
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.secret_key, algorithm=settings.algorithm)


def verify_access_token(token: str | None) -> dict[str, Any] | None:
    """Decode a bearer token.

    Fails closed: returns None for a missing, malformed, expired or
    badly signed token instead of raising.
    """
    if not token:
        return None
    try:
        payload = jwt.decode(token, settings.secret_key, algorithms=[settings.algorithm])
    except jwt.PyJWTError as e:
        logger.debug("Rejected bearer token: %s", e)
        return None
    if not payload.get("userId") or not payload.get("role"):
        return None
    return payload
