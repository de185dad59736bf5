"""GitHub OAuth Provider."""

from __future__ import annotations

from typing import Sequence

from apps.popup_auth.infrastructure.oauth.providers.base import OAuthProvider

GITHUB_BASE_URL = "https://github.com"


class GitHubOAuthProvider(OAuthProvider):
    """GitHub OAuth 프로바이더 (GitHub Enterprise는 base_url로 지정)."""

    name = "github"
    default_base_url = GITHUB_BASE_URL

    @property
    def authorization_endpoint(self) -> str:
        return f"{self.base_url}/login/oauth/authorize"

    @property
    def token_endpoint(self) -> str:
        return f"{self.base_url}/login/oauth/access_token"

    def authorization_params(self, state: str, scopes: Sequence[str]) -> dict[str, str]:
        params = {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": self.redirect_uri,
        }
        if scopes:
            params["scope"] = " ".join(scopes)
        params["state"] = state
        return params

    def token_request_data(self, code: str) -> dict[str, str]:
        return {
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "code": code,
            "redirect_uri": self.redirect_uri,
        }
