"""HTTP Controllers."""

from apps.popup_auth.presentation.http.controllers.root_router import router as root_router

__all__ = ["root_router"]
