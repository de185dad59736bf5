"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Generator
from unittest.mock import MagicMock

import pytest

# apps.popup_auth.main은 import 시점에 Settings를 로드하므로 모듈 레벨에서 설정
os.environ.setdefault("POPUP_AUTH_SECRET", "test-secret-key-for-testing-only")
os.environ.setdefault("POPUP_AUTH_ENVIRONMENT", "test")

if TYPE_CHECKING:
    from fastapi import FastAPI
    from fastapi.testclient import TestClient

    from apps.popup_auth.setup.config import Settings


TEST_SECRET = "test-secret-key-for-testing-only"


# ============================================================
# Settings / App
# ============================================================


@pytest.fixture
def settings() -> "Settings":
    """테스트용 Settings."""
    from apps.popup_auth.setup.config import Settings

    return Settings(
        secret=TEST_SECRET,
        environment="test",
        allow_site_id_list="example.com, docs.example.org",
        github_oauth_id="gh-client-id",
        github_oauth_secret="gh-client-secret",
        gitlab_oauth_id="gl-client-id",
        gitlab_oauth_secret="gl-client-secret",
    )


@pytest.fixture
def app(settings: "Settings") -> "FastAPI":
    """테스트용 FastAPI 애플리케이션."""
    from apps.popup_auth.main import create_app

    return create_app(settings)


@pytest.fixture
def client(app: "FastAPI") -> Generator["TestClient", None, None]:
    """TestClient (Secure 쿠키 왕복을 위해 https base URL)."""
    from fastapi.testclient import TestClient

    with TestClient(app, base_url="https://testserver", follow_redirects=False) as test_client:
        yield test_client


# ============================================================
# Mock Port Fixtures
# ============================================================


@pytest.fixture
def mock_token_manager() -> MagicMock:
    """Mock StateTokenManager."""
    manager = MagicMock()
    manager.generate.return_value = "generated-state-value-0123456789abcdef"
    manager.verify.return_value = True
    return manager


@pytest.fixture
def mock_oauth_client() -> MagicMock:
    """Mock OAuthClient."""
    from unittest.mock import AsyncMock

    from apps.popup_auth.application.oauth.ports import OAuthTokens

    client = MagicMock()
    client.name = "github"
    client.create_authorization_url.return_value = "https://github.com/login/oauth/authorize?x=1"
    client.exchange_code = AsyncMock(return_value=OAuthTokens(access_token="gho_test_token"))
    return client


@pytest.fixture
def mock_client_factory(mock_oauth_client: MagicMock) -> MagicMock:
    """Mock OAuthClientFactory."""
    factory = MagicMock()
    factory.create.return_value = mock_oauth_client
    return factory
