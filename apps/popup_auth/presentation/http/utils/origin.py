"""Request Origin Utilities.

callback URL 생성을 위해 원본 요청의 Origin을 결정합니다.
"""

from typing import Optional

from fastapi import Request

# 기본 포트 (생략 가능)
_DEFAULT_PORTS = {"https": "443", "http": "80"}


def _first_value(header: Optional[str]) -> Optional[str]:
    """쉼표로 구분된 헤더에서 첫 번째 값 추출.

    X-Forwarded-* 헤더는 프록시 체인에서 쉼표로 구분될 수 있음.
    """
    return header.split(",")[0].strip() if header else None


def _resolve_scheme(request: Request) -> str:
    """요청에서 스킴 결정 (X-Forwarded-Proto > URL > https)."""
    forwarded = _first_value(request.headers.get("x-forwarded-proto"))
    return forwarded or request.url.scheme or "https"


def _resolve_host(request: Request, scheme: str) -> Optional[str]:
    """요청에서 호스트(필요 시 포트 포함) 결정.

    우선순위:
    1. X-Forwarded-Host (+ X-Forwarded-Port, 기본 포트가 아닐 때만)
    2. Host 헤더 (클라이언트가 보낸 그대로)
    3. URL에서 추출
    """
    forwarded = _first_value(request.headers.get("x-forwarded-host"))
    if forwarded:
        port = _first_value(request.headers.get("x-forwarded-port"))
        if ":" not in forwarded and port and port != _DEFAULT_PORTS.get(scheme.lower()):
            return f"{forwarded}:{port}"
        return forwarded

    return _first_value(request.headers.get("host")) or request.url.netloc or None


def get_request_origin(request: Request) -> Optional[str]:
    """요청에서 Origin 추출.

    프록시 헤더 (X-Forwarded-*) 를 고려하여 원본 요청의 Origin을 결정합니다.

    Returns:
        "https://example.com" 형태의 Origin 문자열, 또는 None
    """
    scheme = _resolve_scheme(request)
    host = _resolve_host(request, scheme)
    if not host:
        return None
    return f"{scheme}://{host}"


def resolve_callback_base_url(request: Request, public_base_url: Optional[str]) -> str:
    """callback URL의 base (설정값 > 요청 Origin)."""
    if public_base_url:
        return public_base_url
    return get_request_origin(request) or str(request.base_url).rstrip("/")
