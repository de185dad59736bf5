"""OAuth Provider 단위 테스트."""

from urllib.parse import parse_qs, urlsplit

import httpx
import pytest
import respx

from apps.popup_auth.application.oauth.exceptions import (
    InvalidCodeError,
    NetworkError,
    OAuthProviderError,
)
from apps.popup_auth.infrastructure.oauth import GitHubOAuthProvider, GitLabOAuthProvider

REDIRECT_URI = "https://auth.example.net/callback?provider=github&site_id=example.com"


def query_of(url: str) -> dict[str, list[str]]:
    return parse_qs(urlsplit(url).query)


@pytest.fixture
def github() -> GitHubOAuthProvider:
    return GitHubOAuthProvider(
        client_id="gh-client-id",
        client_secret="gh-client-secret",
        redirect_uri=REDIRECT_URI,
    )


@pytest.fixture
def gitlab() -> GitLabOAuthProvider:
    return GitLabOAuthProvider(
        client_id="gl-client-id",
        client_secret="gl-client-secret",
        redirect_uri="https://auth.example.net/callback?provider=gitlab&site_id=example.com",
    )


class TestAuthorizationUrl:
    """인증 URL 생성 테스트."""

    def test_github_authorization_url(self, github: GitHubOAuthProvider) -> None:
        url = github.create_authorization_url("state-123", ("repo", "user"))

        assert url.startswith("https://github.com/login/oauth/authorize?")
        assert "scope=repo+user" in url
        assert query_of(url) == {
            "response_type": ["code"],
            "client_id": ["gh-client-id"],
            "redirect_uri": [REDIRECT_URI],
            "scope": ["repo user"],
            "state": ["state-123"],
        }

    def test_github_without_scope_omits_param(self, github: GitHubOAuthProvider) -> None:
        url = github.create_authorization_url("state-123", ())

        assert "scope" not in query_of(url)

    def test_gitlab_authorization_url(self, gitlab: GitLabOAuthProvider) -> None:
        url = gitlab.create_authorization_url("state-456", ("api",))

        assert url.startswith("https://gitlab.com/oauth/authorize?")
        query = query_of(url)
        assert query["scope"] == ["api"]
        assert query["state"] == ["state-456"]
        assert query["client_id"] == ["gl-client-id"]

    def test_self_hosted_base_url(self) -> None:
        provider = GitLabOAuthProvider(
            client_id="id",
            client_secret="secret",
            redirect_uri="https://auth.example.net/callback",
            base_url="https://gitlab.internal.example.com/",
        )

        assert provider.authorization_endpoint == "https://gitlab.internal.example.com/oauth/authorize"
        assert provider.token_endpoint == "https://gitlab.internal.example.com/oauth/token"


class TestExchangeCode:
    """토큰 교환 테스트."""

    @pytest.mark.asyncio
    async def test_github_exchange_success(self, github: GitHubOAuthProvider) -> None:
        with respx.mock:
            route = respx.post("https://github.com/login/oauth/access_token").mock(
                return_value=httpx.Response(
                    200,
                    json={"access_token": "gho_abc", "token_type": "bearer", "scope": "repo,user"},
                )
            )

            tokens = await github.exchange_code("code-123")

        assert tokens.access_token == "gho_abc"
        assert tokens.scope == "repo,user"

        request = route.calls.last.request
        assert request.headers["accept"] == "application/json"
        assert parse_qs(request.content.decode()) == {
            "client_id": ["gh-client-id"],
            "client_secret": ["gh-client-secret"],
            "code": ["code-123"],
            "redirect_uri": [REDIRECT_URI],
        }

    @pytest.mark.asyncio
    async def test_gitlab_exchange_sends_grant_type(self, gitlab: GitLabOAuthProvider) -> None:
        with respx.mock:
            route = respx.post("https://gitlab.com/oauth/token").mock(
                return_value=httpx.Response(200, json={"access_token": "glpat-xyz"})
            )

            tokens = await gitlab.exchange_code("code-456")

        assert tokens.access_token == "glpat-xyz"
        body = parse_qs(route.calls.last.request.content.decode())
        assert body["grant_type"] == ["authorization_code"]
        assert body["code"] == ["code-456"]

    @pytest.mark.asyncio
    async def test_github_bad_verification_code(self, github: GitHubOAuthProvider) -> None:
        """GitHub은 잘못된 코드에도 200 + error 본문으로 응답."""
        with respx.mock:
            respx.post("https://github.com/login/oauth/access_token").mock(
                return_value=httpx.Response(
                    200,
                    json={
                        "error": "bad_verification_code",
                        "error_description": "The code passed is incorrect or expired.",
                    },
                )
            )

            with pytest.raises(InvalidCodeError) as exc_info:
                await github.exchange_code("stale-code")

        assert exc_info.value.message == "The code passed is incorrect or expired."

    @pytest.mark.asyncio
    async def test_gitlab_invalid_grant(self, gitlab: GitLabOAuthProvider) -> None:
        with respx.mock:
            respx.post("https://gitlab.com/oauth/token").mock(
                return_value=httpx.Response(400, json={"error": "invalid_grant"})
            )

            with pytest.raises(InvalidCodeError) as exc_info:
                await gitlab.exchange_code("stale-code")

        assert exc_info.value.message == "Invalid code"

    @pytest.mark.asyncio
    async def test_other_provider_error(self, github: GitHubOAuthProvider) -> None:
        with respx.mock:
            respx.post("https://github.com/login/oauth/access_token").mock(
                return_value=httpx.Response(200, json={"error": "incorrect_client_credentials"})
            )

            with pytest.raises(OAuthProviderError) as exc_info:
                await github.exchange_code("code")

        assert exc_info.value.provider == "github"
        assert exc_info.value.error == "incorrect_client_credentials"

    @pytest.mark.asyncio
    async def test_http_error_without_body(self, github: GitHubOAuthProvider) -> None:
        with respx.mock:
            respx.post("https://github.com/login/oauth/access_token").mock(
                return_value=httpx.Response(502, text="Bad Gateway")
            )

            with pytest.raises(OAuthProviderError) as exc_info:
                await github.exchange_code("code")

        assert exc_info.value.error == "http_502"

    @pytest.mark.asyncio
    async def test_missing_access_token(self, github: GitHubOAuthProvider) -> None:
        with respx.mock:
            respx.post("https://github.com/login/oauth/access_token").mock(
                return_value=httpx.Response(200, json={"token_type": "bearer"})
            )

            with pytest.raises(OAuthProviderError) as exc_info:
                await github.exchange_code("code")

        assert exc_info.value.error == "invalid_response"

    @pytest.mark.asyncio
    async def test_connection_failure_raises_network_error(
        self, github: GitHubOAuthProvider
    ) -> None:
        with respx.mock:
            respx.post("https://github.com/login/oauth/access_token").mock(
                side_effect=httpx.ConnectError("connection refused")
            )

            with pytest.raises(NetworkError) as exc_info:
                await github.exchange_code("code")

        assert exc_info.value.provider == "github"
        assert exc_info.value.message == "Network error"

    @pytest.mark.asyncio
    async def test_timeout_raises_network_error(self, gitlab: GitLabOAuthProvider) -> None:
        with respx.mock:
            respx.post("https://gitlab.com/oauth/token").mock(
                side_effect=httpx.ReadTimeout("timed out")
            )

            with pytest.raises(NetworkError):
                await gitlab.exchange_code("code")
