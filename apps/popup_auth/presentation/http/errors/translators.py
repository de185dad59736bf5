"""Error Translators.

애플리케이션 예외를 HTTP 상태 코드로 변환합니다.
"""

from apps.popup_auth.application.common.exceptions import ApplicationError
from apps.popup_auth.application.oauth.exceptions import (
    InvalidCodeError,
    InvalidStateError,
    NetworkError,
    OAuthProviderError,
    RequestRejectedError,
)


def translate_application_error(exc: ApplicationError) -> tuple[int, str]:
    """애플리케이션 예외를 (status_code, code) 튜플로 변환.

    Returns:
        (HTTP 상태 코드, 에러 코드)
    """
    if isinstance(exc, RequestRejectedError):
        return 400, "BAD_REQUEST"
    if isinstance(exc, InvalidStateError):
        return 400, "INVALID_STATE"
    if isinstance(exc, InvalidCodeError):
        return 400, "INVALID_CODE"
    if isinstance(exc, OAuthProviderError):
        return 400, "OAUTH_PROVIDER_ERROR"
    if isinstance(exc, NetworkError):
        return 500, "NETWORK_ERROR"
    return 400, "APPLICATION_ERROR"
