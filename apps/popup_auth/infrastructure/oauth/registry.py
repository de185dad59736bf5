"""OAuth Provider Registry.

OAuthClientFactory 포트의 구현체입니다.
provider 이름 → 구현 클래스 매핑은 닫힌 집합이며, 새 provider는 여기에 등록합니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping

from apps.popup_auth.application.oauth.exceptions import InvalidProviderError
from apps.popup_auth.infrastructure.oauth.providers import (
    GitHubOAuthProvider,
    GitLabOAuthProvider,
    OAuthProvider,
)

if TYPE_CHECKING:
    from apps.popup_auth.setup.config import Settings

logger = logging.getLogger(__name__)

PROVIDER_CLASSES: Mapping[str, type[OAuthProvider]] = {
    GitHubOAuthProvider.name: GitHubOAuthProvider,
    GitLabOAuthProvider.name: GitLabOAuthProvider,
}


@dataclass(frozen=True)
class ProviderCredentials:
    """provider 클라이언트 자격 증명."""

    client_id: str
    client_secret: str
    base_url: str | None = None


class ProviderRegistry:
    """OAuth 프로바이더 레지스트리."""

    def __init__(
        self,
        credentials: Mapping[str, ProviderCredentials],
        *,
        timeout_seconds: float = 10.0,
    ) -> None:
        self._credentials = dict(credentials)
        self._timeout = timeout_seconds

    @classmethod
    def from_settings(cls, settings: "Settings") -> "ProviderRegistry":
        """설정에서 레지스트리 생성."""
        return cls(
            {
                "github": ProviderCredentials(
                    client_id=settings.github_oauth_id,
                    client_secret=settings.github_oauth_secret,
                    base_url=settings.github_base_url,
                ),
                "gitlab": ProviderCredentials(
                    client_id=settings.gitlab_oauth_id,
                    client_secret=settings.gitlab_oauth_secret,
                    base_url=settings.gitlab_base_url,
                ),
            },
            timeout_seconds=settings.oauth_timeout_seconds,
        )

    def create(self, provider: str, callback_url: str) -> OAuthProvider:
        """callback URL에 묶인 provider 클라이언트 생성."""
        provider_class = PROVIDER_CLASSES.get(provider)
        credentials = self._credentials.get(provider)
        if provider_class is None or credentials is None:
            raise InvalidProviderError()
        if not credentials.client_id:
            logger.warning("OAuth provider not configured", extra={"provider": provider})
            raise InvalidProviderError()

        return provider_class(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
            redirect_uri=callback_url,
            base_url=credentials.base_url,
            timeout_seconds=self._timeout,
        )
