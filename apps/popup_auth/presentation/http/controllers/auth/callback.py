"""Callback Controller.

팝업 OAuth 콜백 엔드포인트입니다.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request, Response
from fastapi.responses import HTMLResponse, PlainTextResponse

from apps.popup_auth.application.oauth.commands import CallbackInteractor
from apps.popup_auth.application.oauth.dto import CallbackRequest
from apps.popup_auth.application.oauth.exceptions import (
    InvalidProviderError,
    RequestRejectedError,
)
from apps.popup_auth.domain.value_objects import OAuthProviderName
from apps.popup_auth.presentation.http.auth import CookieStateStore
from apps.popup_auth.presentation.http.errors import (
    rejected_response,
    translate_application_error,
)
from apps.popup_auth.presentation.http.utils import resolve_callback_base_url
from apps.popup_auth.presentation.http.views import CompletionMessenger
from apps.popup_auth.setup.config import Settings, get_settings
from apps.popup_auth.setup.dependencies import (
    get_callback_interactor,
    get_completion_messenger,
    get_cookie_state_store,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.api_route(
    "/callback",
    methods=["GET", "HEAD"],
    response_class=HTMLResponse,
    summary="팝업 OAuth 콜백 처리",
)
async def callback(
    request: Request,
    response: Response,
    provider: Optional[str] = Query(None),
    site_id: Optional[str] = Query(None),
    state: Optional[str] = Query(None, description="CSRF state"),
    code: Optional[str] = Query(None, description="OAuth 인증 코드"),
    error: Optional[str] = Query(None, description="provider가 보고한 오류 (access_denied 등)"),
    error_description: Optional[str] = Query(None),
    referer: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
    interactor: CallbackInteractor = Depends(get_callback_interactor),
    cookie_store: CookieStateStore = Depends(get_cookie_state_store),
    messenger: CompletionMessenger = Depends(get_completion_messenger),
):
    """OAuth 콜백을 처리하고 완료 페이지를 렌더링합니다.

    1. provider 확인 (state 쿠키 이름 결정)
    2. state 쿠키 조회 + 무조건 삭제
    3. state 검증, 토큰 교환 (CallbackInteractor)
    4. 성공/실패 결과를 opener handshake 스크립트로 전달

    사이트/provider 검증 실패는 generic 400, 그 외 실패는 error payload로 전달됩니다.
    """
    provider_name = OAuthProviderName.parse(provider)
    if provider_name is None:
        raise InvalidProviderError()

    stored_state = cookie_store.retrieve_and_clear(request, response, provider_name.value)

    try:
        result = await interactor.execute(
            CallbackRequest(
                site_id=site_id,
                provider=provider_name.value,
                state=state,
                code=code,
                referer=referer,
                stored_state=stored_state,
                error=error,
                error_description=error_description,
                callback_base_url=resolve_callback_base_url(request, settings.public_base_url),
            )
        )
    except RequestRejectedError:
        rejected = rejected_response()
        cookie_store.clear(rejected, provider_name.value)
        return rejected
    except Exception as e:
        logger.error(
            f"{provider_name.value.capitalize()} OAuth callback failed: {type(e).__name__}",
            exc_info=True,
        )
        failed = PlainTextResponse("Internal Server Error", status_code=500)
        cookie_store.clear(failed, provider_name.value)
        return failed

    if not result.succeeded:
        response.status_code, _ = translate_application_error(result.error)

    # access token이 담긴 페이지
    response.headers["Cache-Control"] = "no-store"
    response.headers["Referrer-Policy"] = "no-referrer"
    return messenger.render(result.payload)
