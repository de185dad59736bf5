"""OAuth flow ports."""

from apps.popup_auth.application.oauth.ports.oauth_client import (
    OAuthClient,
    OAuthClientFactory,
    OAuthTokens,
)
from apps.popup_auth.application.oauth.ports.state_token_manager import StateTokenManager

__all__ = [
    "OAuthClient",
    "OAuthClientFactory",
    "OAuthTokens",
    "StateTokenManager",
]
