"""Popup Auth Application Entry Point.

여러 허용 사이트의 팝업/iframe 로그인을 위한 OAuth authorization code 중개 서비스입니다.

    GET /auth      → state 쿠키 설정 후 provider로 리다이렉트
    GET /callback  → state 검증, 코드 교환, opener handshake 페이지 렌더링
    *              → 418

서버 측 세션/토큰 저장 없음. 유일한 상태는 플로우당 하나의 단기 state 쿠키입니다.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.popup_auth.presentation.http.controllers import root_router
from apps.popup_auth.presentation.http.errors import register_exception_handlers
from apps.popup_auth.setup.config import Settings, get_settings
from apps.popup_auth.setup.logging import setup_logging
from apps.popup_auth.setup.tracing import (
    configure_tracing,
    instrument_fastapi,
    instrument_httpx,
    shutdown_tracing,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    logger.info("Starting Popup Auth API")
    yield
    logger.info("Shutting down Popup Auth API")
    shutdown_tracing()


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = settings or get_settings()

    setup_logging("DEBUG" if settings.environment == "local" else settings.log_level)

    configure_tracing(settings)
    instrument_httpx(settings)

    app = FastAPI(
        title=settings.app_name,
        description="팝업 OAuth 중개 서비스",
        version=settings.service_version,
        lifespan=lifespan,
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # 팩토리에 전달된 설정을 요청 처리에도 사용
    app.dependency_overrides[get_settings] = lambda: settings

    register_exception_handlers(app)
    instrument_fastapi(app, settings)

    app.include_router(root_router)

    logger.info(
        "Popup Auth configured",
        extra={
            "environment": settings.environment,
            "allowed_sites": len(settings.allowed_site_ids),
            "state_token_mode": settings.state_token_mode,
        },
    )
    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.popup_auth.main:app",
        host="0.0.0.0",
        port=8000,
    )
