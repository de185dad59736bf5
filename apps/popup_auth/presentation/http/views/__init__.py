"""HTML views."""

from apps.popup_auth.presentation.http.views.completion import (
    CompletionMessenger,
    completion_message,
    completion_signal,
)

__all__ = ["CompletionMessenger", "completion_message", "completion_signal"]
