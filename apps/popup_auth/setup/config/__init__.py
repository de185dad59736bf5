"""Configuration."""

from apps.popup_auth.setup.config.settings import (
    DEFAULT_SITE_ID_LIST,
    Settings,
    get_settings,
)

__all__ = ["DEFAULT_SITE_ID_LIST", "Settings", "get_settings"]
