"""State Token Managers.

StateTokenManager 포트의 구현체입니다.

- SignedStateTokenManager: 256bit 랜덤 nonce를 itsdangerous(HMAC-SHA256)로 서명,
  발급 시각 포함. 쿠키가 변조되어도 서명으로 거부됩니다. (기본값)
- RandomStateTokenManager: 256bit 랜덤 값, 쿠키와의 동등성만으로 검증합니다.
"""

from __future__ import annotations

import re
import secrets

from itsdangerous import BadSignature, URLSafeTimedSerializer

STATE_SALT = "popup-auth-oauth-state"
NONCE_BYTES = 32

_RANDOM_STATE_PATTERN = re.compile(r"^[A-Za-z0-9_-]{43,}$")


class SignedStateTokenManager:
    """HMAC 서명 state 관리자."""

    def __init__(self, secret: str, *, max_age_seconds: int = 180) -> None:
        self._serializer = URLSafeTimedSerializer(secret_key=secret, salt=STATE_SALT)
        self._max_age = max_age_seconds

    def generate(self) -> str:
        """서명된 state 생성."""
        return self._serializer.dumps(secrets.token_urlsafe(NONCE_BYTES))

    def verify(self, candidate: str) -> bool:
        """서명 및 발급 시각 검증 (SignatureExpired는 BadSignature 하위)."""
        try:
            nonce = self._serializer.loads(candidate, max_age=self._max_age)
        except BadSignature:
            return False
        return isinstance(nonce, str) and len(nonce) >= NONCE_BYTES


class RandomStateTokenManager:
    """랜덤 state 관리자 (쿠키가 유일한 진실 공급원)."""

    def generate(self) -> str:
        return secrets.token_urlsafe(NONCE_BYTES)

    def verify(self, candidate: str) -> bool:
        """형식만 확인. 동등성 비교는 호출자 몫."""
        return bool(_RANDOM_STATE_PATTERN.match(candidate))
