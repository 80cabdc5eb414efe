from typing import Any, Optional, Dict


class BaseError(Exception):
    """Base exception class for the application.

    ``message`` is the user-facing text, ``code`` the stable error kind that
    clients can branch on.
    """

    status_code: int = 500
    code: str = "internal_error"

    def __init__(
        self,
        message: str = "Sunucu hatası",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseError):
    """Missing or malformed input"""

    status_code = 400
    code = "validation_error"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message=message, details={"field": field} if field else {})
        self.field = field


class AuthError(BaseError):
    """Missing, invalid or expired credentials"""

    status_code = 401
    code = "unauthorized"

    def __init__(self, message: str = "Yetkilendirme gerekli"):
        super().__init__(message=message)


class ForbiddenError(BaseError):
    """Authenticated but the role is not allowed"""

    status_code = 403
    code = "forbidden"

    def __init__(self, message: str = "Bu işlem için yetkiniz yok"):
        super().__init__(message=message)


class NotFoundError(BaseError):
    """Referenced entity does not exist"""

    status_code = 404
    code = "not_found"

    def __init__(self, message: str, entity: Optional[str] = None, id: Any = None):
        details = {"entity": entity, "id": id} if entity else {}
        super().__init__(message=message, details=details)


class ConflictError(BaseError):
    """Duplicate unique key"""

    status_code = 409
    code = "conflict"

    def __init__(self, message: str):
        super().__init__(message=message)
