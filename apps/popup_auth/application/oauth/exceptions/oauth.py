"""OAuth Exceptions.

팝업 OAuth 플로우의 실패 종류입니다.

    RequestRejectedError    - provider 접촉/쿠키 기록 전에 거부 (generic 400)
      ├─ InvalidSiteIdError
      ├─ InvalidRefererError
      └─ InvalidProviderError
    InvalidStateError       - state 누락/불일치/만료
    InvalidCodeError        - code 누락 또는 provider가 거부
    OAuthProviderError      - provider가 보고한 기타 오류
    NetworkError            - provider 연결 불가
"""

from apps.popup_auth.application.common.exceptions.base import ApplicationError


class RequestRejectedError(ApplicationError):
    """요청 사전 검증 실패."""


class InvalidSiteIdError(RequestRejectedError):
    """허용되지 않은 site_id."""

    def __init__(self, reason: str = "Invalid site_id") -> None:
        super().__init__(reason)


class InvalidRefererError(RequestRejectedError):
    """신뢰할 수 없는 Referer."""

    def __init__(self, reason: str = "Invalid referer") -> None:
        super().__init__(reason)


class InvalidProviderError(RequestRejectedError):
    """지원하지 않는 provider."""

    def __init__(self, reason: str = "Invalid provider") -> None:
        super().__init__(reason)


class InvalidStateError(ApplicationError):
    """OAuth state 검증 실패."""

    def __init__(self, reason: str = "Invalid state") -> None:
        super().__init__(reason)


class InvalidCodeError(ApplicationError):
    """인증 코드 누락 또는 거부."""

    def __init__(self, reason: str = "Invalid code") -> None:
        super().__init__(reason)


class OAuthProviderError(ApplicationError):
    """OAuth 프로바이더 오류."""

    def __init__(self, provider: str, error: str, description: str | None = None) -> None:
        self.provider = provider
        self.error = error
        self.description = description
        super().__init__(description or error)


class NetworkError(ApplicationError):
    """OAuth 프로바이더 통신 실패."""

    def __init__(self, provider: str, reason: str = "Network error") -> None:
        self.provider = provider
        self.reason = reason
        super().__init__("Network error")
