"""Security adapters."""

from apps.popup_auth.infrastructure.security.state_token import (
    RandomStateTokenManager,
    SignedStateTokenManager,
)

__all__ = ["RandomStateTokenManager", "SignedStateTokenManager"]
