"""Map error kinds to ``{"error": ...}`` JSON responses."""

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from bankpage.common.errors import BankPageError

logger = structlog.get_logger()


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def bank_page_error_handler(request: Request, exc: BankPageError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(
            "bank_page_error",
            path=request.url.path,
            status_code=exc.status_code,
            error=exc.message,
            cause=repr(exc.__cause__) if exc.__cause__ else None,
        )
    else:
        logger.info("bank_page_rejected", path=request.url.path, status_code=exc.status_code, error=exc.message)
    return error_response(exc.status_code, exc.message)


async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    message = errors[0].get("msg", "invalid request") if errors else "invalid request"
    return error_response(400, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("unhandled_exception", path=request.url.path, exc_info=exc)
    return error_response(500, "internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BankPageError, bank_page_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_exception_handler)
