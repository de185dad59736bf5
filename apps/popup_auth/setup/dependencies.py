"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
모든 구성 요소는 불변 Settings에서 만들어지며 요청 간 공유 가변 상태가 없습니다.
"""

from __future__ import annotations

from fastapi import Depends

from apps.popup_auth.application.oauth.commands import AuthorizeInteractor, CallbackInteractor
from apps.popup_auth.application.oauth.ports import OAuthClientFactory, StateTokenManager
from apps.popup_auth.application.oauth.services import SiteAuthorizer
from apps.popup_auth.infrastructure.oauth import ProviderRegistry
from apps.popup_auth.infrastructure.security import (
    RandomStateTokenManager,
    SignedStateTokenManager,
)
from apps.popup_auth.presentation.http.auth import CookieStateStore
from apps.popup_auth.presentation.http.views import CompletionMessenger
from apps.popup_auth.setup.config import Settings, get_settings

# ============================================================
# Services / Adapters
# ============================================================


def get_site_authorizer(settings: Settings = Depends(get_settings)) -> SiteAuthorizer:
    """SiteAuthorizer 제공자."""
    return SiteAuthorizer(
        settings.allowed_site_ids,
        require_trusted_referer=settings.require_trusted_referer,
    )


def get_state_token_manager(settings: Settings = Depends(get_settings)) -> StateTokenManager:
    """StateTokenManager 제공자 (state_token_mode에 따라 선택)."""
    if settings.state_token_mode == "random":
        return RandomStateTokenManager()
    return SignedStateTokenManager(settings.secret, max_age_seconds=settings.state_ttl_seconds)


def get_oauth_client_factory(settings: Settings = Depends(get_settings)) -> OAuthClientFactory:
    """OAuthClientFactory 제공자."""
    return ProviderRegistry.from_settings(settings)


def get_cookie_state_store(settings: Settings = Depends(get_settings)) -> CookieStateStore:
    """CookieStateStore 제공자."""
    return CookieStateStore(settings.secret, max_age_seconds=settings.state_ttl_seconds)


def get_completion_messenger() -> CompletionMessenger:
    """CompletionMessenger 제공자."""
    return CompletionMessenger()


# ============================================================
# UseCase Dependencies
# ============================================================


def get_authorize_interactor(
    site_authorizer: SiteAuthorizer = Depends(get_site_authorizer),
    client_factory: OAuthClientFactory = Depends(get_oauth_client_factory),
    token_manager: StateTokenManager = Depends(get_state_token_manager),
) -> AuthorizeInteractor:
    """AuthorizeInteractor 제공자."""
    return AuthorizeInteractor(
        site_authorizer=site_authorizer,
        client_factory=client_factory,
        token_manager=token_manager,
    )


def get_callback_interactor(
    site_authorizer: SiteAuthorizer = Depends(get_site_authorizer),
    client_factory: OAuthClientFactory = Depends(get_oauth_client_factory),
    token_manager: StateTokenManager = Depends(get_state_token_manager),
) -> CallbackInteractor:
    """CallbackInteractor 제공자."""
    return CallbackInteractor(
        site_authorizer=site_authorizer,
        client_factory=client_factory,
        token_manager=token_manager,
    )
