"""OAuth Provider Base Class."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Sequence
from urllib.parse import urlencode

import httpx

from apps.popup_auth.application.oauth.exceptions import (
    InvalidCodeError,
    NetworkError,
    OAuthProviderError,
)
from apps.popup_auth.application.oauth.ports import OAuthTokens

logger = logging.getLogger(__name__)

# 코드 자체가 잘못된 경우 (만료/재사용/오타)
INVALID_CODE_ERRORS = frozenset({"bad_verification_code", "invalid_grant", "invalid_request"})


class OAuthProvider(ABC):
    """OAuth 프로바이더 추상 클래스.

    요청마다 callback URL(redirect_uri)에 묶여 생성되는 OAuthClient 구현체입니다.
    하위 클래스는 엔드포인트와 요청 파라미터만 정의합니다.
    """

    name: str
    default_base_url: str

    def __init__(
        self,
        *,
        client_id: str,
        client_secret: str,
        redirect_uri: str,
        base_url: str | None = None,
        timeout_seconds: float = 10.0,
    ) -> None:
        self.client_id = client_id
        self.client_secret = client_secret
        self.redirect_uri = redirect_uri
        self.base_url = (base_url or self.default_base_url).rstrip("/")
        self._timeout = timeout_seconds

    @property
    @abstractmethod
    def authorization_endpoint(self) -> str:
        """인증 엔드포인트 URL."""
        raise NotImplementedError

    @property
    @abstractmethod
    def token_endpoint(self) -> str:
        """토큰 엔드포인트 URL."""
        raise NotImplementedError

    @abstractmethod
    def authorization_params(self, state: str, scopes: Sequence[str]) -> dict[str, str]:
        """인증 URL 쿼리 파라미터."""
        raise NotImplementedError

    @abstractmethod
    def token_request_data(self, code: str) -> dict[str, str]:
        """토큰 교환 요청 본문."""
        raise NotImplementedError

    def create_authorization_url(self, state: str, scopes: Sequence[str]) -> str:
        """인증 URL 생성."""
        return f"{self.authorization_endpoint}?{urlencode(self.authorization_params(state, scopes))}"

    async def exchange_code(self, code: str) -> OAuthTokens:
        """인증 코드로 토큰 교환.

        재시도하지 않습니다. 연결 실패는 즉시 NetworkError로 올라갑니다.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                response = await client.post(
                    self.token_endpoint,
                    data=self.token_request_data(code),
                    headers={"Accept": "application/json"},
                )
        except httpx.TransportError as e:
            logger.warning(
                "OAuth token request failed",
                extra={"provider": self.name, "error": type(e).__name__},
            )
            raise NetworkError(self.name, str(e)) from e

        return self._parse_token_response(response)

    def _parse_token_response(self, response: httpx.Response) -> OAuthTokens:
        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        # GitHub은 오류도 200으로 응답
        error = data.get("error")
        if error:
            description = data.get("error_description")
            logger.warning(
                "OAuth provider rejected code exchange",
                extra={"provider": self.name, "error": error, "status": response.status_code},
            )
            if error in INVALID_CODE_ERRORS:
                raise InvalidCodeError(description or "Invalid code")
            raise OAuthProviderError(self.name, error, description)

        if response.is_error:
            logger.warning(
                "OAuth API error",
                extra={"provider": self.name, "status": response.status_code},
            )
            raise OAuthProviderError(self.name, f"http_{response.status_code}")

        access_token = data.get("access_token")
        if not access_token:
            raise OAuthProviderError(self.name, "invalid_response", "Missing access token")

        return OAuthTokens(
            access_token=access_token,
            token_type=data.get("token_type", "bearer"),
            scope=data.get("scope"),
        )
