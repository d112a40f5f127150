"""
Board API Response Utilities
Standardized response format and error handling
"""
from fastapi import HTTPException, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from typing import Any, Dict, List
from datetime import datetime, timezone

from .logging_config import api_logger


def _now() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


# ============================================================
# SUCCESS RESPONSES
# ============================================================

def success(data: Any = None, message: str = None, meta: Dict = None) -> Dict:
    """Create success response"""
    response = {
        "ok": True,
        "timestamp": _now(),
    }

    if data is not None:
        response["data"] = data

    if message:
        response["message"] = message

    if meta:
        response["meta"] = meta

    return response


def paginated(items: List, total: int, page: int = 1, per_page: int = 20) -> Dict:
    """Paginated list response"""
    return {
        "ok": True,
        "data": items,
        "pagination": {
            "total": total,
            "page": page,
            "per_page": per_page,
            "total_pages": (total + per_page - 1) // per_page,
            "has_next": page * per_page < total,
            "has_prev": page > 1,
        },
        "timestamp": _now(),
    }


# ============================================================
# ERROR RESPONSES
# ============================================================

class ApiException(HTTPException):
    """API exception with an error code for the failure envelope"""

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: str = None,
        details: Dict = None,
    ):
        self.error_code = error_code or f"ERR_{status_code}"
        self.details = details
        super().__init__(status_code=status_code, detail=message)


def _failure(status_code: int, error: Any, error_code: str, details: Any = None, headers: Dict = None) -> JSONResponse:
    content = {
        "ok": False,
        "error": error,
        "error_code": error_code,
        "timestamp": _now(),
    }
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content), headers=headers)


# ============================================================
# EXCEPTION HANDLERS
# ============================================================

async def api_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Global exception handler for API errors"""

    if isinstance(exc, ApiException):
        api_logger.warning(
            f"API Error: {exc.detail}",
            status_code=exc.status_code,
            error_code=exc.error_code,
            path=request.url.path,
        )
        return _failure(exc.status_code, exc.detail, exc.error_code, exc.details, getattr(exc, "headers", None))

    if isinstance(exc, StarletteHTTPException):
        api_logger.warning(
            f"HTTP Error: {exc.detail}",
            status_code=exc.status_code,
            path=request.url.path,
        )
        return _failure(exc.status_code, exc.detail, f"HTTP_{exc.status_code}", headers=getattr(exc, "headers", None))

    api_logger.error(
        f"Unexpected error: {exc}",
        error=exc,
        path=request.url.path,
    )
    return _failure(500, "An unexpected error occurred", "INTERNAL_ERROR")


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Wrap request validation failures in the failure envelope"""
    api_logger.warning(
        "Validation Error",
        status_code=422,
        path=request.url.path,
    )
    return _failure(422, "Request validation failed", "VALIDATION_ERROR", exc.errors())
