"""HTTP error handling."""

from apps.popup_auth.presentation.http.errors.handlers import (
    register_exception_handlers,
    rejected_response,
)
from apps.popup_auth.presentation.http.errors.translators import translate_application_error

__all__ = [
    "register_exception_handlers",
    "rejected_response",
    "translate_application_error",
]
