"""CookieStateStore 단위 테스트."""

import time
from unittest.mock import patch

import pytest
from fastapi import Request, Response
from itsdangerous import TimestampSigner

from apps.popup_auth.presentation.http.auth import CookieStateStore, state_cookie_name

SECRET = "test-secret-key-for-testing-only"


def make_request(cookies: dict[str, str] | None = None) -> Request:
    headers = []
    if cookies:
        cookie_header = "; ".join(f"{name}={value}" for name, value in cookies.items())
        headers.append((b"cookie", cookie_header.encode()))
    return Request({"type": "http", "method": "GET", "path": "/callback", "headers": headers})


def set_cookie_headers(response: Response) -> list[str]:
    return response.headers.getlist("set-cookie")


def cookie_value(header: str) -> str:
    return header.split(";", 1)[0].split("=", 1)[1]


@pytest.fixture
def store() -> CookieStateStore:
    return CookieStateStore(SECRET)


class TestStateCookieName:
    """쿠키 이름 테스트."""

    def test_secure_prefix(self) -> None:
        assert state_cookie_name("github") == "__Secure-github-state"
        assert state_cookie_name("gitlab") == "__Secure-gitlab-state"


class TestCookieStateStore:
    """CookieStateStore 테스트."""

    def test_store_sets_cookie_attributes(self, store: CookieStateStore) -> None:
        response = Response()

        store.store(response, "github", "state-123", "https://example.com")

        [header] = set_cookie_headers(response)
        assert header.startswith("__Secure-github-state=")
        lowered = header.lower()
        assert "httponly" in lowered
        assert "secure" in lowered
        assert "samesite=lax" in lowered
        assert "path=/callback" in lowered
        assert "max-age=180" in lowered

    def test_store_then_retrieve(self, store: CookieStateStore) -> None:
        response = Response()
        store.store(response, "github", "state-123", "https://example.com")
        value = cookie_value(set_cookie_headers(response)[0])

        stored = store.retrieve(make_request({"__Secure-github-state": value}), "github")

        assert stored.state == "state-123"
        assert stored.trust_origin == "https://example.com"

    def test_retrieve_without_origin(self, store: CookieStateStore) -> None:
        response = Response()
        store.store(response, "gitlab", "state-456")
        value = cookie_value(set_cookie_headers(response)[0])

        stored = store.retrieve(make_request({"__Secure-gitlab-state": value}), "gitlab")

        assert stored.state == "state-456"
        assert stored.trust_origin is None

    def test_retrieve_missing_cookie(self, store: CookieStateStore) -> None:
        assert store.retrieve(make_request(), "github") is None

    def test_retrieve_forged_cookie(self, store: CookieStateStore) -> None:
        request = make_request({"__Secure-github-state": "forged-value"})

        assert store.retrieve(request, "github") is None

    def test_cookie_bound_to_provider(self, store: CookieStateStore) -> None:
        """다른 provider 쿠키 값을 옮겨 붙여도 거부 (provider별 salt)."""
        response = Response()
        store.store(response, "github", "state-123")
        value = cookie_value(set_cookie_headers(response)[0])

        request = make_request({"__Secure-gitlab-state": value})

        assert store.retrieve(request, "gitlab") is None

    def test_retrieve_expired_cookie(self, store: CookieStateStore) -> None:
        """브라우저가 만료 쿠키를 보내더라도 서버에서 거부."""
        response = Response()
        with patch.object(TimestampSigner, "get_timestamp", return_value=int(time.time()) - 181):
            store.store(response, "github", "state-123")
        value = cookie_value(set_cookie_headers(response)[0])

        assert store.retrieve(make_request({"__Secure-github-state": value}), "github") is None

    def test_clear_expires_cookie(self, store: CookieStateStore) -> None:
        response = Response()

        store.clear(response, "github")

        [header] = set_cookie_headers(response)
        lowered = header.lower()
        assert header.startswith("__Secure-github-state=")
        assert "max-age=0" in lowered
        assert "path=/callback" in lowered
        assert "secure" in lowered

    def test_retrieve_and_clear_always_clears(self, store: CookieStateStore) -> None:
        response = Response()

        stored = store.retrieve_and_clear(
            make_request({"__Secure-github-state": "garbage"}), response, "github"
        )

        assert stored is None
        assert "max-age=0" in set_cookie_headers(response)[0].lower()
