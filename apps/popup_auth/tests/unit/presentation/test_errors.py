"""HTTP 에러 변환 테스트."""

import pytest

from apps.popup_auth.application.common.exceptions import ApplicationError
from apps.popup_auth.application.oauth.exceptions import (
    InvalidCodeError,
    InvalidProviderError,
    InvalidRefererError,
    InvalidSiteIdError,
    InvalidStateError,
    NetworkError,
    OAuthProviderError,
)
from apps.popup_auth.presentation.http.errors import translate_application_error


@pytest.mark.parametrize(
    "error, expected",
    [
        (InvalidSiteIdError(), (400, "BAD_REQUEST")),
        (InvalidRefererError(), (400, "BAD_REQUEST")),
        (InvalidProviderError(), (400, "BAD_REQUEST")),
        (InvalidStateError(), (400, "INVALID_STATE")),
        (InvalidCodeError(), (400, "INVALID_CODE")),
        (OAuthProviderError("github", "access_denied"), (400, "OAUTH_PROVIDER_ERROR")),
        (NetworkError("github", "refused"), (500, "NETWORK_ERROR")),
        (ApplicationError("other"), (400, "APPLICATION_ERROR")),
    ],
)
def test_translate_application_error(error: ApplicationError, expected: tuple[int, str]) -> None:
    assert translate_application_error(error) == expected
