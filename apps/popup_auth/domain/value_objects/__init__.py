"""Domain Value Objects."""

from apps.popup_auth.domain.value_objects.origin import Origin
from apps.popup_auth.domain.value_objects.provider import OAuthProviderName

__all__ = ["OAuthProviderName", "Origin"]
