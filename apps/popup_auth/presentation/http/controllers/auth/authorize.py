"""Authorize Controller.

팝업 OAuth 시작 엔드포인트입니다.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, Query, Request
from fastapi.responses import RedirectResponse

from apps.popup_auth.application.oauth.commands import AuthorizeInteractor
from apps.popup_auth.application.oauth.dto import AuthorizeRequest
from apps.popup_auth.presentation.http.auth import CookieStateStore
from apps.popup_auth.presentation.http.utils import resolve_callback_base_url
from apps.popup_auth.setup.config import Settings, get_settings
from apps.popup_auth.setup.dependencies import (
    get_authorize_interactor,
    get_cookie_state_store,
)

router = APIRouter()


@router.api_route("/auth", methods=["GET", "HEAD"], summary="팝업 OAuth 시작")
async def authorize(
    request: Request,
    site_id: Optional[str] = Query(None, description="허용 목록의 사이트 호스트"),
    provider: Optional[str] = Query(None, description="OAuth 프로바이더 (github, gitlab)"),
    scope: Optional[str] = Query(None, description="공백 구분 scope"),
    referer: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
    interactor: AuthorizeInteractor = Depends(get_authorize_interactor),
    cookie_store: CookieStateStore = Depends(get_cookie_state_store),
) -> RedirectResponse:
    """provider 인증 페이지로 리다이렉트합니다.

    state 쿠키(`__Secure-<provider>-state`, Path=/callback)를 함께 설정합니다.
    사이트/provider 검증에 실패하면 쿠키 없이 400을 반환합니다.
    """
    result = interactor.execute(
        AuthorizeRequest(
            site_id=site_id,
            provider=provider,
            scope=scope,
            referer=referer,
            callback_base_url=resolve_callback_base_url(request, settings.public_base_url),
        )
    )

    response = RedirectResponse(url=result.authorization_url, status_code=302)
    cookie_store.store(response, result.provider, result.state, result.trust_origin)
    return response
