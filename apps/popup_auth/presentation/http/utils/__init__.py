"""HTTP utilities."""

from apps.popup_auth.presentation.http.utils.origin import (
    get_request_origin,
    resolve_callback_base_url,
)

__all__ = ["get_request_origin", "resolve_callback_base_url"]
