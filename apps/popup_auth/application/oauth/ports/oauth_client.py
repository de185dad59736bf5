"""OAuthClient Port.

provider + callback URL로 만들어지는 OAuth 클라이언트 capability 인터페이스입니다.
"""

from dataclasses import dataclass
from typing import Protocol, Sequence


@dataclass(frozen=True)
class OAuthTokens:
    """OAuth 토큰 데이터."""

    access_token: str
    token_type: str = "bearer"
    scope: str | None = None


class OAuthClient(Protocol):
    """OAuth 클라이언트 인터페이스.

    구현체:
        - GitHubOAuthProvider, GitLabOAuthProvider (infrastructure/oauth/providers/)
    """

    name: str

    def create_authorization_url(self, state: str, scopes: Sequence[str]) -> str:
        """인증 URL 생성."""
        ...

    async def exchange_code(self, code: str) -> OAuthTokens:
        """인증 코드로 토큰 교환.

        Raises:
            InvalidCodeError: 코드가 잘못되었거나 만료/재사용됨
            OAuthProviderError: 기타 provider 오류
            NetworkError: provider 연결 불가
        """
        ...


class OAuthClientFactory(Protocol):
    """OAuth 클라이언트 팩토리 인터페이스.

    구현체:
        - ProviderRegistry (infrastructure/oauth/registry.py)
    """

    def create(self, provider: str, callback_url: str) -> OAuthClient:
        """provider 클라이언트 생성.

        Raises:
            InvalidProviderError: 지원하지 않거나 설정되지 않은 provider
        """
        ...
