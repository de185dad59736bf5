"""Exception Handlers.

애플리케이션 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse

from apps.popup_auth.application.common.exceptions import ApplicationError
from apps.popup_auth.application.oauth.exceptions import RequestRejectedError
from apps.popup_auth.presentation.http.errors.translators import translate_application_error

logger = logging.getLogger(__name__)

# 어떤 검사가 실패했는지 드러내지 않는 고정 응답
REJECTED_CONTENT = {"detail": "Bad Request", "code": "BAD_REQUEST"}


def rejected_response() -> JSONResponse:
    """사전 검증 실패 응답 (generic 400)."""
    return JSONResponse(status_code=400, content=REJECTED_CONTENT)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(RequestRejectedError)
    async def request_rejected_handler(request: Request, exc: RequestRejectedError):
        return rejected_response()

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        status_code, code = translate_application_error(exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message, "code": code},
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error: {type(exc).__name__}",
            exc_info=(type(exc), exc, exc.__traceback__),
        )
        return PlainTextResponse("Internal Server Error", status_code=500)
