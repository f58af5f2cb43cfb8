"""Translation of service exceptions into HTTP error responses."""

import logging
from datetime import datetime, timezone
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from weather_station.weather.models import ErrorResponse
from weather_station.weather.sampler import MissingWeatherDataError

logger = logging.getLogger(__name__)

MISSING_DATA_MESSAGE = "An internal error occurred due to missing data"
VALIDATION_FAILED_MESSAGE = "Internal server error: data validation failed"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred while processing your request"


def error_response(request: Request, status: HTTPStatus, message: str) -> JSONResponse:
    """Build a JSON error response.

    Args:
        request: Request that failed
        status: HTTP status to return
        message: Message safe to expose to clients

    Returns:
        JSONResponse carrying an ErrorResponse body
    """
    body = ErrorResponse(
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
        status=status.value,
        error=status.phrase,
        message=message,
        path=request.url.path
    )
    return JSONResponse(status_code=status.value, content=body.model_dump())


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning(f"Invalid argument while processing {request.url.path}: {exc}")
    return error_response(request, HTTPStatus.BAD_REQUEST, str(exc))


async def handle_validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    logger.error(f"Data validation error while processing {request.url.path}: {exc}")
    return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, VALIDATION_FAILED_MESSAGE)


async def handle_missing_data(request: Request, exc: MissingWeatherDataError) -> JSONResponse:
    logger.error(f"Missing data while processing {request.url.path}: {exc}", exc_info=exc)
    return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, MISSING_DATA_MESSAGE)


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"Unexpected error while processing {request.url.path}: {exc}", exc_info=exc)
    return error_response(request, HTTPStatus.INTERNAL_SERVER_ERROR, UNEXPECTED_ERROR_MESSAGE)


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application.

    Handlers are looked up along the exception's MRO, so pydantic's
    ``ValidationError`` (itself a ``ValueError``) gets its own 500 response.
    """
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(ValidationError, handle_validation_error)
    app.add_exception_handler(MissingWeatherDataError, handle_missing_data)
    app.add_exception_handler(Exception, handle_unexpected_error)
