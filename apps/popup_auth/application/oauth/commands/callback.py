"""Callback Command.

팝업 OAuth 콜백 처리 Use Case입니다.

Architecture:
    - UseCase(지휘자): CallbackInteractor
    - Services(연주자): SiteAuthorizer
    - Ports(인프라): OAuthClientFactory, StateTokenManager
"""

from __future__ import annotations

import hmac
import logging
from typing import TYPE_CHECKING

from apps.popup_auth.application.oauth.dto import (
    CallbackRequest,
    CallbackResponse,
    CompletionPayload,
)
from apps.popup_auth.application.oauth.exceptions import (
    InvalidCodeError,
    InvalidProviderError,
    InvalidStateError,
    NetworkError,
    OAuthProviderError,
)
from apps.popup_auth.application.oauth.services import build_callback_url
from apps.popup_auth.domain.value_objects import OAuthProviderName

if TYPE_CHECKING:
    from apps.popup_auth.application.oauth.ports import (
        OAuthClient,
        OAuthClientFactory,
        StateTokenManager,
    )
    from apps.popup_auth.application.oauth.services import SiteAuthorizer

logger = logging.getLogger(__name__)


class CallbackInteractor:
    """팝업 OAuth 콜백 Interactor (지휘자).

    서버 메모리 없이 쿼리 파라미터(provider, site_id)와 state 쿠키만으로
    /auth 단계의 컨텍스트를 복원합니다.

    Workflow:
        1. site_id / Referer 재검증, provider 클라이언트 재구성
        2. state 검증 (쿠키 값과 일치 + 토큰 자체 검증)
        3. provider가 보고한 오류 확인 (사용자 거부 등)
        4. code 확인
        5. 토큰 교환
        6. 완료 payload 생성 (성공/실패 모두)

    재시도하지 않습니다. 실패 시 클라이언트가 /auth부터 다시 시작해야 합니다.
    """

    def __init__(
        self,
        site_authorizer: "SiteAuthorizer",
        client_factory: "OAuthClientFactory",
        token_manager: "StateTokenManager",
    ) -> None:
        self._site_authorizer = site_authorizer
        self._client_factory = client_factory
        self._token_manager = token_manager

    async def execute(self, request: CallbackRequest) -> CallbackResponse:
        """OAuth 콜백을 처리합니다.

        Returns:
            완료 payload. 실패한 경우 error에 원인 예외가 담깁니다.

        Raises:
            InvalidSiteIdError: 허용되지 않은 site_id
            InvalidRefererError: 신뢰할 수 없는 Referer (strict 모드)
            InvalidProviderError: 지원하지 않는 provider
        """
        stored = request.stored_state

        # 1. 컨텍스트 복원 (거부 예외는 그대로 전파)
        site = self._site_authorizer.authorize(
            request.site_id,
            request.referer,
            known_origin=stored.trust_origin if stored else None,
        )
        provider = OAuthProviderName.parse(request.provider)
        if provider is None:
            logger.warning("Rejected provider", extra={"provider": request.provider})
            raise InvalidProviderError()

        callback_url = build_callback_url(
            request.callback_base_url,
            provider=provider.value,
            site_id=site.site_id,
        )
        client = self._client_factory.create(provider.value, callback_url)

        try:
            access_token = await self._complete(client, request)
        except (InvalidStateError, InvalidCodeError, OAuthProviderError, NetworkError) as e:
            logger.warning(
                "Popup authorization failed",
                extra={
                    "provider": provider.value,
                    "site_id": site.site_id,
                    "error": type(e).__name__,
                },
            )
            payload = CompletionPayload.failure(provider.value, e.message, site.trust_origin)
            return CallbackResponse(payload=payload, error=e)

        logger.info(
            "Popup authorization completed",
            extra={"provider": provider.value, "site_id": site.site_id},
        )
        payload = CompletionPayload.success(provider.value, access_token, site.trust_origin)
        return CallbackResponse(payload=payload)

    async def _complete(self, client: "OAuthClient", request: CallbackRequest) -> str:
        # 2. state 검증
        self._verify_state(request)

        # 3. provider 오류 (access_denied 등)
        if request.error:
            raise OAuthProviderError(client.name, request.error, request.error_description)

        # 4. code 확인
        if not request.code:
            raise InvalidCodeError()

        # 5. 토큰 교환
        tokens = await client.exchange_code(request.code)
        return tokens.access_token

    def _verify_state(self, request: CallbackRequest) -> None:
        stored = request.stored_state
        if not request.state or stored is None:
            raise InvalidStateError()

        if not hmac.compare_digest(request.state.encode(), stored.state.encode()):
            logger.warning("State mismatch", extra={"state": request.state[:8]})
            raise InvalidStateError()

        if not self._token_manager.verify(request.state):
            logger.warning("State verification failed", extra={"state": request.state[:8]})
            raise InvalidStateError()
