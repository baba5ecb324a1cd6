"""Translate domain errors into localized JSON responses."""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from georegion.config import get_settings
from georegion.errors import (
    PolygonValidationError,
    RegionError,
    RegionNotFoundError,
    StoreUnavailableError,
    UnsupportedUnitError,
)
from georegion.i18n import pick_locale, translate
from georegion.schemas.region import ErrorResponse

logger = logging.getLogger("georegion.api.errors")

STATUS_BY_ERROR = {
    PolygonValidationError: status.HTTP_400_BAD_REQUEST,
    UnsupportedUnitError: status.HTTP_400_BAD_REQUEST,
    RegionNotFoundError: status.HTTP_404_NOT_FOUND,
    StoreUnavailableError: status.HTTP_503_SERVICE_UNAVAILABLE,
}


class ApiError(RegionError):
    """Request-level error raised by route handlers (bad query combination etc.)."""

    def __init__(self, code: str, status_code: int, params: Optional[dict[str, Any]] = None):
        self.code = code
        self.status_code = status_code
        super().__init__(params)


def status_for(exc: RegionError) -> int:
    if isinstance(exc, ApiError):
        return exc.status_code
    for error_type, status_code in STATUS_BY_ERROR.items():
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def request_locale(request: Request) -> str:
    return pick_locale(
        request.query_params.get("lang"),
        request.headers.get("accept-language"),
        get_settings().DEFAULT_LOCALE,
    )


async def region_error_handler(request: Request, exc: RegionError) -> JSONResponse:
    status_code = status_for(exc)
    if status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc!r}")
    else:
        logger.info(f"{request.method} {request.url.path} rejected: {exc!r}")

    body = ErrorResponse(
        code=exc.code,
        message=translate(exc.code, request_locale(request), **exc.params),
        params=exc.params,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RegionError, region_error_handler)
