"""SiteAuthorizer 단위 테스트."""

import pytest

from apps.popup_auth.application.oauth.exceptions import (
    InvalidRefererError,
    InvalidSiteIdError,
)
from apps.popup_auth.application.oauth.services import SiteAuthorizer


class TestSiteAuthorizer:
    """SiteAuthorizer 테스트."""

    @pytest.fixture
    def authorizer(self) -> SiteAuthorizer:
        return SiteAuthorizer(["example.com", "localhost"])

    def test_allowed_site_with_matching_referer(self, authorizer: SiteAuthorizer) -> None:
        """Referer host가 site_id와 같으면 trust origin 도출."""
        result = authorizer.authorize("example.com", "https://example.com/docs/page")

        assert result.site_id == "example.com"
        assert result.trust_origin == "https://example.com"

    def test_referer_keeps_non_default_port(self, authorizer: SiteAuthorizer) -> None:
        result = authorizer.authorize("localhost", "http://localhost:3000/admin/")

        assert result.trust_origin == "http://localhost:3000"

    def test_missing_referer_has_no_trust_origin(self, authorizer: SiteAuthorizer) -> None:
        result = authorizer.authorize("example.com", None)

        assert result.trust_origin is None

    def test_mismatched_referer_has_no_trust_origin(self, authorizer: SiteAuthorizer) -> None:
        """다른 host의 Referer는 무시 (요청 자체는 통과)."""
        result = authorizer.authorize("example.com", "https://evil.example.net/")

        assert result.site_id == "example.com"
        assert result.trust_origin is None

    def test_subdomain_referer_is_not_trusted(self, authorizer: SiteAuthorizer) -> None:
        result = authorizer.authorize("example.com", "https://www.example.com/")

        assert result.trust_origin is None

    @pytest.mark.parametrize("site_id", [None, "", "evil.com", "EXAMPLE.COM", "example.com "])
    def test_rejects_unknown_site(self, authorizer: SiteAuthorizer, site_id) -> None:
        with pytest.raises(InvalidSiteIdError):
            authorizer.authorize(site_id, "https://example.com/")

    def test_known_origin_takes_precedence(self, authorizer: SiteAuthorizer) -> None:
        """콜백 단계: 쿠키로 돌아온 origin이 provider Referer보다 우선."""
        result = authorizer.authorize(
            "example.com",
            "https://github.com/",
            known_origin="https://example.com:8443",
        )

        assert result.trust_origin == "https://example.com:8443"

    def test_known_origin_for_other_host_is_ignored(self, authorizer: SiteAuthorizer) -> None:
        result = authorizer.authorize(
            "example.com",
            "https://example.com/page",
            known_origin="https://evil.com",
        )

        assert result.trust_origin == "https://example.com"

    def test_strict_mode_rejects_untrusted_referer(self) -> None:
        authorizer = SiteAuthorizer(["example.com"], require_trusted_referer=True)

        with pytest.raises(InvalidRefererError):
            authorizer.authorize("example.com", None)

    def test_strict_mode_accepts_trusted_referer(self) -> None:
        authorizer = SiteAuthorizer(["example.com"], require_trusted_referer=True)

        result = authorizer.authorize("example.com", "https://example.com/")

        assert result.trust_origin == "https://example.com"
