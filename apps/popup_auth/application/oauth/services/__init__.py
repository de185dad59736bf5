"""OAuth flow services."""

from apps.popup_auth.application.oauth.services.callback_url import (
    CALLBACK_PATH,
    build_callback_url,
)
from apps.popup_auth.application.oauth.services.site_authorizer import SiteAuthorizer

__all__ = ["CALLBACK_PATH", "SiteAuthorizer", "build_callback_url"]
