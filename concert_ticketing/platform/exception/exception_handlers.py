from typing import Any, Callable, Coroutine

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.responses import Response

from concert_ticketing.platform.exception.exceptions import CustomBaseError, StorageError
from concert_ticketing.platform.logging.loguru_io import Logger


# Type alias for exception handlers (compatible with Starlette's expected signature)
ExceptionHandler = Callable[[Request, Exception], Coroutine[Any, Any, Response]]

INTERNAL_ERROR_MESSAGE = 'Internal server error'


def _error_body(message: str) -> dict[str, str]:
    return {'error': message}


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = '.'.join(str(loc) for loc in error.get('loc', ()) if loc != 'body')
        message = error.get('msg', 'Invalid value')
        parts.append(f'{location}: {message}' if location else message)
    return '; '.join(parts) or 'Invalid request'


async def custom_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, CustomBaseError) else StorageError()
    if isinstance(error, StorageError):
        return JSONResponse(status_code=error.status_code, content=_error_body(INTERNAL_ERROR_MESSAGE))
    return JSONResponse(status_code=error.status_code, content=_error_body(error.message))


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    error = exc if isinstance(exc, RequestValidationError) else RequestValidationError([])
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(_format_validation_errors(error)),
    )


async def http_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    if not isinstance(exc, StarletteHTTPException):
        return await general_500_exception_handler(request, exc)
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(str(exc.detail)),
        headers=getattr(exc, 'headers', None),
    )


async def storage_error_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'[DB] {request.method} {request.url.path} failed: {type(exc).__name__}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(INTERNAL_ERROR_MESSAGE),
    )


async def general_500_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    Logger.base.error(f'{request.method} {request.url.path} failed: {type(exc).__name__}: {exc}')
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(INTERNAL_ERROR_MESSAGE),
    )


# Exception handler mapping
EXCEPTION_HANDLERS: dict[type[Exception], ExceptionHandler] = {
    CustomBaseError: custom_error_handler,
    RequestValidationError: validation_error_handler,
    StarletteHTTPException: http_exception_handler,
    SQLAlchemyError: storage_error_handler,
    Exception: general_500_exception_handler,  # Catch-all for unhandled exceptions
}


def register_exception_handlers(app: FastAPI) -> None:
    for exception_class, handler in EXCEPTION_HANDLERS.items():
        app.add_exception_handler(exception_class, handler)
