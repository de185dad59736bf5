"""StateTokenManager Port.

CSRF 방지용 state 값 생성/검증 인터페이스입니다.
서버 측 저장소 없이 (secret, token)만으로 검증합니다.
"""

from typing import Protocol


class StateTokenManager(Protocol):
    """State 토큰 관리자 인터페이스.

    구현체:
        - SignedStateTokenManager (infrastructure/security/) - HMAC 서명 + 발급 시각
        - RandomStateTokenManager (infrastructure/security/) - 256bit 랜덤, 쿠키 동등성만 검증
    """

    def generate(self) -> str:
        """추측 불가능한 state 생성."""
        ...

    def verify(self, candidate: str) -> bool:
        """state 자체 검증 (서명/형식).

        쿠키 값과의 동등성 비교는 호출자가 별도로 수행합니다.
        """
        ...
