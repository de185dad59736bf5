"""Authorize Command.

팝업 OAuth 플로우 시작 Use Case입니다.

Architecture:
    - UseCase(지휘자): AuthorizeInteractor
    - Services(연주자): SiteAuthorizer
    - Ports(인프라): OAuthClientFactory, StateTokenManager
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.popup_auth.application.oauth.dto import AuthorizeRequest, AuthorizeResponse
from apps.popup_auth.application.oauth.exceptions import InvalidProviderError
from apps.popup_auth.application.oauth.services import build_callback_url
from apps.popup_auth.domain.value_objects import OAuthProviderName

if TYPE_CHECKING:
    from apps.popup_auth.application.oauth.ports import OAuthClientFactory, StateTokenManager
    from apps.popup_auth.application.oauth.services import SiteAuthorizer

logger = logging.getLogger(__name__)


class AuthorizeInteractor:
    """팝업 OAuth 시작 Interactor (지휘자).

    Workflow:
        1. site_id / Referer 검증 (SiteAuthorizer)
        2. provider 검증
        3. provider 클라이언트 생성 (callback URL에 provider, site_id 포함)
        4. state 생성 (StateTokenManager)
        5. 인증 URL 반환

    state 쿠키 기록과 리다이렉트는 presentation 계층이 담당합니다.
    매 호출마다 독립된 새 state를 발급합니다.
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

    def execute(self, request: AuthorizeRequest) -> AuthorizeResponse:
        """인증 URL을 생성합니다.

        Raises:
            InvalidSiteIdError: 허용되지 않은 site_id
            InvalidRefererError: 신뢰할 수 없는 Referer (strict 모드)
            InvalidProviderError: 지원하지 않는 provider
        """
        # 1. 사이트 검증 (fail fast)
        site = self._site_authorizer.authorize(request.site_id, request.referer)

        # 2. provider 검증
        provider = OAuthProviderName.parse(request.provider)
        if provider is None:
            logger.warning("Rejected provider", extra={"provider": request.provider})
            raise InvalidProviderError()

        # 3. 클라이언트 생성
        callback_url = build_callback_url(
            request.callback_base_url,
            provider=provider.value,
            site_id=site.site_id,
        )
        client = self._client_factory.create(provider.value, callback_url)

        # 4. state 생성
        state = self._token_manager.generate()

        # 5. 인증 URL
        authorization_url = client.create_authorization_url(state, request.scopes)

        logger.info(
            "Popup authorization started",
            extra={
                "provider": provider.value,
                "site_id": site.site_id,
                "trusted": site.trust_origin is not None,
            },
        )

        return AuthorizeResponse(
            authorization_url=authorization_url,
            provider=provider.value,
            state=state,
            trust_origin=site.trust_origin,
        )
