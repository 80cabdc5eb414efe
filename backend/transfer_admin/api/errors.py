import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from transfer_admin.core.exceptions import BaseError

logger = logging.getLogger(__name__)


def _envelope(status_code: int, message: str, code: str, details: dict | None = None) -> JSONResponse:
    content = {"ok": False, "error": message, "code": code}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


async def app_error_handler(request: Request, exc: BaseError):
    return _envelope(exc.status_code, exc.message, exc.code, exc.details)


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies/params are client errors like any other validation failure."""
    errors = [
        {"field": ".".join(str(loc) for loc in e["loc"] if loc != "body"), "message": e["msg"]}
        for e in exc.errors()
    ]
    return _envelope(400, "Geçersiz istek", "validation_error", {"errors": errors})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    code = {401: "unauthorized", 403: "forbidden", 404: "not_found", 405: "method_not_allowed"}.get(exc.status_code, "http_error")
    return _envelope(exc.status_code, str(exc.detail), code)


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return _envelope(500, "Sunucu hatası", "internal_error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
