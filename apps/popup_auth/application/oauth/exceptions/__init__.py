"""OAuth flow exceptions."""

from apps.popup_auth.application.oauth.exceptions.oauth import (
    InvalidCodeError,
    InvalidProviderError,
    InvalidRefererError,
    InvalidSiteIdError,
    InvalidStateError,
    NetworkError,
    OAuthProviderError,
    RequestRejectedError,
)

__all__ = [
    "InvalidCodeError",
    "InvalidProviderError",
    "InvalidRefererError",
    "InvalidSiteIdError",
    "InvalidStateError",
    "NetworkError",
    "OAuthProviderError",
    "RequestRejectedError",
]
