from logging import Logger
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import HTTPException, RequestValidationError
from fastapi.responses import JSONResponse

from src.core.exception import AppValueError, BaseAppError, NotFoundError
from src.core.logging import get_logger

logger: Logger = get_logger(__name__)


def init(app: FastAPI):
    def _result(status_code: int, detail: Any, _type: str = "Error", headers: dict | None = None):
        logger.debug(f"Error response {status_code} [{_type}]: {detail}")
        content = {
            "type": _type,
            "error": detail,
        }
        return JSONResponse(
            status_code=status_code,
            content=content,
            headers=headers or {"X-Error": _type},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(_request: Request, exc: HTTPException):
        return _result(exc.status_code, str(exc.detail), headers=exc.headers)  # ty:ignore[invalid-argument-type]

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(_request: Request, exc: RequestValidationError):
        messages = [error.get("msg", "Validation error") for error in exc.errors()]
        return _result(status.HTTP_422_UNPROCESSABLE_CONTENT, "; ".join(messages), "ValidationError")

    @app.exception_handler(ValueError)
    async def builtin_value_error_handler(_request: Request, exc: ValueError):
        return _result(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc), _type="ValueError")

    @app.exception_handler(AppValueError)
    async def app_value_error_handler(_request: Request, exc: AppValueError):
        return _result(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message, _type="ValueError")

    @app.exception_handler(NotFoundError)
    async def not_found_error_handler(_request: Request, exc: NotFoundError):
        return _result(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message, _type="NotFoundError")

    @app.exception_handler(BaseAppError)
    async def app_exception_handler(_request: Request, exc: BaseAppError):
        logger.debug(f"BaseAppError handler caught: {type(exc).__name__} - {exc.message}")
        return _result(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message, _type=exc.__class__.__name__)

    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled exception: {type(exc).__name__}: {exc!s}",
            exc_info=True,
            extra={
                "request_path": str(request.url.path),
                "request_method": request.method,
                "exception_type": type(exc).__name__,
            },
        )

        return _result(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", "InternalServerError")
