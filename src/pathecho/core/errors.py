"""Error handling utilities and custom exceptions."""
from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base application error."""

    def __init__(
        self,
        message: str,
        *,
        code: str = "app_error",
        http_status: int = status.HTTP_400_BAD_REQUEST,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_dict(self) -> dict[str, str]:
        return {"error": self.code, "message": self.message}


class ErrorResponse(BaseModel):
    error: str
    message: str


def error_code_for(http_status: int) -> str:
    """Map an HTTP status to a snake_case error code, e.g. 404 -> ``not_found``."""
    try:
        phrase = HTTPStatus(http_status).phrase
    except ValueError:
        return "http_error"
    return phrase.lower().replace(" ", "_").replace("-", "_")


async def app_error_handler(_: Request, exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.http_status, content=exc.to_dict())


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render framework HTTP errors (unmatched routes, wrong methods) in the app envelope."""
    error = AppError(
        str(exc.detail),
        code=error_code_for(exc.status_code),
        http_status=exc.status_code,
    )
    logger.debug("%s %s -> %s", request.method, request.url.path, exc.status_code)
    return JSONResponse(
        status_code=error.http_status,
        content=error.to_dict(),
        headers=getattr(exc, "headers", None),
    )
