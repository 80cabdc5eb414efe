from typing import Any, Dict
from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer

from transfer_admin.core.exceptions import AuthError, ForbiddenError
from transfer_admin.core.security import verify_access_token

# auto_error=False: a missing header must produce our own 401 envelope
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)

def get_current_user(token: str | None = Depends(oauth2_scheme)) -> Dict[str, Any]:
    """Return the token claims (userId, email, role)."""
    if not token:
        raise AuthError("Yetkilendirme gerekli")
    claims = verify_access_token(token)
    if claims is None:
        raise AuthError("Geçersiz token")
    return claims

def require_roles(*allowed: str):
    def checker(user: Dict[str, Any] = Depends(get_current_user)) -> Dict[str, Any]:
        if user.get("role") not in allowed:
            raise ForbiddenError()
        return user
    return checker
