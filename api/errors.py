from fastapi import Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Dict, Optional
from models.errors import BookingError, ErrorKind, MethodNotAllowedError
import logging

logger = logging.getLogger(__name__)

# パスごとに許可するメソッド (405 の Allow ヘッダー)
ALLOWED_METHODS: Dict[str, str] = {}


def error_response(request: Request, exc: BookingError, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    if exc.kind == ErrorKind.INVALID_REQUEST:
        logger.info(f"{request.method} {request.url.path}: {exc.message}")
    else:
        logger.error(f"{request.method} {request.url.path}: {exc.message}")
    response_headers = dict(exc.headers or {})
    response_headers.update(headers or {})
    return JSONResponse(status_code=exc.status_code, content={"error": exc.public_message}, headers=response_headers or None)


async def booking_error_handler(request: Request, exc: BookingError):
    return error_response(request, exc)


async def starlette_error_handler(request: Request, exc: StarletteHTTPException):
    """ルーティングで弾かれたメソッドも {"error": ...} 形式で返す"""
    if exc.status_code != 405:
        return await http_exception_handler(request, exc)
    allow = ALLOWED_METHODS.get(request.url.path) or (exc.headers or {}).get("Allow", "")
    return error_response(request, MethodNotAllowedError(request.method, allow=allow))
