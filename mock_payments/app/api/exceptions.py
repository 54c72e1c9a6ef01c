from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..core.errors import (
    AuthenticationRequiredError,
    InvalidCredentialsError,
    PaymentValidationError,
    StorageUnavailableError,
)
from ..models import ErrorResponse


logger = logging.getLogger(__name__)

BASIC_CHALLENGE = {"WWW-Authenticate": "Basic"}


def _envelope(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(status=status_code, message=message).model_dump(),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(PaymentValidationError)
    async def payment_validation_handler(
        request: Request, exc: PaymentValidationError
    ) -> JSONResponse:
        return _envelope(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info("request.invalid", extra={"path": request.url.path, "errors": str(exc.errors())})
        return _envelope(400, "Invalid request body")

    @app.exception_handler(AuthenticationRequiredError)
    async def authentication_required_handler(
        request: Request, exc: AuthenticationRequiredError
    ) -> JSONResponse:
        return _envelope(401, str(exc), headers=BASIC_CHALLENGE)

    @app.exception_handler(InvalidCredentialsError)
    async def invalid_credentials_handler(
        request: Request, exc: InvalidCredentialsError
    ) -> JSONResponse:
        return _envelope(401, str(exc), headers=BASIC_CHALLENGE)

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable_handler(
        request: Request, exc: StorageUnavailableError
    ) -> JSONResponse:
        return _envelope(503, str(exc))
