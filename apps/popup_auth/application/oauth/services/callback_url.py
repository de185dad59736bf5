"""Callback URL 생성.

provider와 site_id를 쿼리로 다시 실어 보내, 콜백 요청만으로
서버 세션 없이 컨텍스트를 복원할 수 있게 합니다.
"""

from urllib.parse import urlencode

CALLBACK_PATH = "/callback"


def build_callback_url(base_url: str, *, provider: str, site_id: str) -> str:
    """고정 /callback 경로 + provider, site_id 쿼리."""
    query = urlencode({"provider": provider, "site_id": site_id})
    return f"{base_url.rstrip('/')}{CALLBACK_PATH}?{query}"
