"""State Cookie Store.

OAuth state를 클라이언트 측 서명 쿠키로 보관합니다.

쿠키 속성:
    - 이름: "__Secure-<provider>-state" (Secure 컨텍스트 강제)
    - HttpOnly, Secure, SameSite=Lax
    - Path: /callback 으로 제한
    - Max-Age: state TTL (기본 180초)

값은 provider별 salt로 서명된 {"state", "origin"} 입니다.
서명에 발급 시각이 포함되어 Max-Age가 지난 값은 서버에서도 거부합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from itsdangerous import BadSignature, URLSafeTimedSerializer

from apps.popup_auth.application.oauth.dto import StoredState
from apps.popup_auth.application.oauth.services import CALLBACK_PATH

if TYPE_CHECKING:
    from fastapi import Request, Response

logger = logging.getLogger(__name__)

STATE_COOKIE_PREFIX = "__Secure-"
COOKIE_SAMESITE = "lax"


def state_cookie_name(provider: str) -> str:
    """provider별 state 쿠키 이름."""
    return f"{STATE_COOKIE_PREFIX}{provider}-state"


class CookieStateStore:
    """서명 쿠키 기반 state 저장소."""

    def __init__(self, secret: str, *, max_age_seconds: int = 180) -> None:
        self._secret = secret
        self._max_age = max_age_seconds

    def _serializer(self, provider: str) -> URLSafeTimedSerializer:
        return URLSafeTimedSerializer(secret_key=self._secret, salt=f"{provider}-state")

    def store(
        self,
        response: "Response",
        provider: str,
        state: str,
        trust_origin: str | None = None,
    ) -> None:
        """state 쿠키 기록 (같은 이름의 기존 쿠키는 덮어씀)."""
        value = self._serializer(provider).dumps({"state": state, "origin": trust_origin})
        response.set_cookie(
            key=state_cookie_name(provider),
            value=value,
            max_age=self._max_age,
            path=CALLBACK_PATH,
            secure=True,
            httponly=True,
            samesite=COOKIE_SAMESITE,
        )

    def retrieve(self, request: "Request", provider: str) -> StoredState | None:
        """state 쿠키 조회 및 서명 검증. 없거나 잘못되면 None."""
        raw = request.cookies.get(state_cookie_name(provider))
        if not raw:
            return None

        try:
            data = self._serializer(provider).loads(raw, max_age=self._max_age)
        except BadSignature:
            logger.warning("Invalid state cookie signature", extra={"provider": provider})
            return None

        if not isinstance(data, dict) or not isinstance(data.get("state"), str):
            return None
        origin = data.get("origin")
        return StoredState(state=data["state"], trust_origin=origin if isinstance(origin, str) else None)

    def clear(self, response: "Response", provider: str) -> None:
        """state 쿠키 삭제."""
        response.delete_cookie(
            key=state_cookie_name(provider),
            path=CALLBACK_PATH,
            secure=True,
            httponly=True,
            samesite=COOKIE_SAMESITE,
        )

    def retrieve_and_clear(
        self,
        request: "Request",
        response: "Response",
        provider: str,
    ) -> StoredState | None:
        """조회 후 무조건 삭제 (일회용). 조회/검증 실패여도 삭제합니다."""
        try:
            return self.retrieve(request, provider)
        finally:
            self.clear(response, provider)
