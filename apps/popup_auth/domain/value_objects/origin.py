"""Origin Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

# 기본 포트 (직렬화 시 생략)
_DEFAULT_PORTS = {"https": 443, "http": 80}


@dataclass(frozen=True, slots=True)
class Origin:
    """웹 Origin (scheme + host + port).

    브라우저의 origin 직렬화 규칙을 따릅니다: 기본 포트는 생략, host는 소문자.
    """

    scheme: str
    hostname: str
    port: int | None = None

    @classmethod
    def from_url(cls, url: str | None) -> "Origin | None":
        """URL에서 Origin 추출. http(s)가 아니거나 파싱 불가하면 None."""
        if not url:
            return None
        try:
            parts = urlsplit(url.strip())
            port = parts.port
        except ValueError:
            return None

        scheme = parts.scheme.lower()
        if scheme not in _DEFAULT_PORTS or not parts.hostname:
            return None
        if port == _DEFAULT_PORTS[scheme]:
            port = None
        return cls(scheme=scheme, hostname=parts.hostname, port=port)

    def __str__(self) -> str:
        host = f"[{self.hostname}]" if ":" in self.hostname else self.hostname
        if self.port is None:
            return f"{self.scheme}://{host}"
        return f"{self.scheme}://{host}:{self.port}"
