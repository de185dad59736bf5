"""General Router.

Health check 엔드포인트입니다.
"""

from fastapi import APIRouter

from apps.popup_auth.presentation.http.controllers.general.health import (
    router as health_router,
)

router = APIRouter()

router.include_router(health_router)
