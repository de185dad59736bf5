"""OAuth DTOs."""

from apps.popup_auth.application.oauth.dto.oauth import (
    AuthorizeRequest,
    AuthorizeResponse,
    CallbackRequest,
    CallbackResponse,
    CompletionPayload,
    SiteAuthorization,
    StoredState,
)

__all__ = [
    "AuthorizeRequest",
    "AuthorizeResponse",
    "CallbackRequest",
    "CallbackResponse",
    "CompletionPayload",
    "SiteAuthorization",
    "StoredState",
]
