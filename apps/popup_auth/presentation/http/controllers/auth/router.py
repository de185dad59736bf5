"""Auth Router.

팝업 OAuth 엔드포인트(/auth, /callback)를 통합합니다.
"""

from fastapi import APIRouter

from apps.popup_auth.presentation.http.controllers.auth.authorize import (
    router as authorize_router,
)
from apps.popup_auth.presentation.http.controllers.auth.callback import (
    router as callback_router,
)

router = APIRouter()

router.include_router(authorize_router)
router.include_router(callback_router)
