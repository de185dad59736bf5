"""Application Exceptions.

공통 예외만 포함합니다. OAuth 플로우 예외는 직접 import하세요:
  - apps.popup_auth.application.oauth.exceptions.*
"""

from apps.popup_auth.application.common.exceptions.base import ApplicationError

__all__ = ["ApplicationError"]
