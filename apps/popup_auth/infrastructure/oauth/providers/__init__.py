"""OAuth Providers.

각 OAuth 프로바이더 구현체입니다.
"""

from apps.popup_auth.infrastructure.oauth.providers.base import OAuthProvider
from apps.popup_auth.infrastructure.oauth.providers.github import GitHubOAuthProvider
from apps.popup_auth.infrastructure.oauth.providers.gitlab import GitLabOAuthProvider

__all__ = [
    "OAuthProvider",
    "GitHubOAuthProvider",
    "GitLabOAuthProvider",
]
