"""Mapping from ServiceResult failures and request errors to HTTP responses.

Every error body has the shape ``{"error": message}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

if TYPE_CHECKING:
    from storefront.services.result import ServiceResult

STATUS_BY_CODE: dict[str, int] = {
    "VALIDATION_FAILED": status.HTTP_400_BAD_REQUEST,
    "INVALID_CREDENTIALS": status.HTTP_401_UNAUTHORIZED,
    # Profile updates for an unknown id are reported as unauthorized.
    "CUSTOMER_NOT_FOUND": status.HTTP_401_UNAUTHORIZED,
    "EMAIL_TAKEN": status.HTTP_409_CONFLICT,
}


def error_response(result: ServiceResult) -> JSONResponse:
    """Render a failed ServiceResult; unmapped codes are server errors."""
    error = result.error
    code = error.code if error else ""
    message = error.message if error else "Internal server error"
    status_code = STATUS_BY_CODE.get(code, status.HTTP_500_INTERNAL_SERVER_ERROR)
    return JSONResponse(status_code=status_code, content={"error": message})


def _describe(exc: RequestValidationError) -> str:
    parts: list[str] = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        parts.append(f"{loc}: {err.get('msg', 'invalid')}" if loc else str(err.get("msg")))
    return "; ".join(parts) or "Invalid request"


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Undecodable JSON and missing or mistyped fields become 400s."""
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": _describe(exc)})
