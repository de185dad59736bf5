"""GitLab OAuth Provider."""

from __future__ import annotations

from typing import Sequence

from apps.popup_auth.infrastructure.oauth.providers.base import OAuthProvider

GITLAB_BASE_URL = "https://gitlab.com"


class GitLabOAuthProvider(OAuthProvider):
    """GitLab OAuth 프로바이더 (self-managed 인스턴스는 base_url로 지정)."""

    name = "gitlab"
    default_base_url = GITLAB_BASE_URL

    @property
    def authorization_endpoint(self) -> str:
        return f"{self.base_url}/oauth/authorize"

    @property
    def token_endpoint(self) -> str:
        return f"{self.base_url}/oauth/token"

    def authorization_params(self, state: str, scopes: Sequence[str]) -> dict[str, str]:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
        }
        # GitLab은 scope가 없으면 애플리케이션에 설정된 기본 scope를 사용
        if scopes:
            params["scope"] = " ".join(scopes)
        params["state"] = state
        return params

    def token_request_data(self, code: str) -> dict[str, str]:
        # redirect_uri는 인증 요청 때와 정확히 같아야 함
        return {
            "grant_type": "authorization_code",
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }
