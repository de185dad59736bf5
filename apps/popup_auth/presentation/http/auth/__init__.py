"""HTTP auth helpers."""

from apps.popup_auth.presentation.http.auth.state_cookie import (
    CookieStateStore,
    state_cookie_name,
)

__all__ = ["CookieStateStore", "state_cookie_name"]
