"""OAuth Provider Implementations."""

from apps.popup_auth.infrastructure.oauth.providers import (
    GitHubOAuthProvider,
    GitLabOAuthProvider,
    OAuthProvider,
)
from apps.popup_auth.infrastructure.oauth.registry import (
    ProviderCredentials,
    ProviderRegistry,
)

__all__ = [
    "OAuthProvider",
    "GitHubOAuthProvider",
    "GitLabOAuthProvider",
    "ProviderCredentials",
    "ProviderRegistry",
]
