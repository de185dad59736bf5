"""Root Router.

최상위 라우터로, 모든 하위 라우터를 통합합니다.
catch-all(418)은 다른 모든 경로보다 뒤에 등록합니다.
"""

from fastapi import APIRouter

from apps.popup_auth.presentation.http.controllers.auth.router import router as auth_router
from apps.popup_auth.presentation.http.controllers.general.fallback import (
    router as fallback_router,
)
from apps.popup_auth.presentation.http.controllers.general.router import (
    router as general_router,
)

router = APIRouter()

router.include_router(general_router, tags=["general"])
router.include_router(auth_router, tags=["auth"])
router.include_router(fallback_router)
