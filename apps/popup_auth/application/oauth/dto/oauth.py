"""OAuth DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from apps.popup_auth.application.common.exceptions import ApplicationError


@dataclass(frozen=True, slots=True)
class SiteAuthorization:
    """사이트 검증 결과."""

    site_id: str
    trust_origin: str | None = None


@dataclass(frozen=True, slots=True)
class StoredState:
    """state 쿠키에서 복원한 값."""

    state: str
    trust_origin: str | None = None


@dataclass(frozen=True, slots=True)
class AuthorizeRequest:
    """팝업 인증 시작 요청."""

    site_id: str | None
    provider: str | None
    callback_base_url: str
    scope: str | None = None
    referer: str | None = None

    @property
    def scopes(self) -> tuple[str, ...]:
        """공백 구분 scope (없으면 빈 튜플)."""
        return tuple(self.scope.split(" ")) if self.scope else ()


@dataclass(frozen=True, slots=True)
class AuthorizeResponse:
    """팝업 인증 시작 결과."""

    authorization_url: str
    provider: str
    state: str
    trust_origin: str | None = None


@dataclass(frozen=True, slots=True)
class CallbackRequest:
    """OAuth 콜백 요청."""

    site_id: str | None
    provider: str | None
    callback_base_url: str
    state: str | None = None
    code: str | None = None
    referer: str | None = None
    stored_state: StoredState | None = None
    error: str | None = None
    error_description: str | None = None


@dataclass(frozen=True, slots=True)
class CompletionPayload:
    """opener 창으로 전달되는 결과."""

    provider: str
    status: Literal["success", "error"]
    content: dict[str, str] = field(default_factory=dict)
    target_origin: str | None = None

    @classmethod
    def success(cls, provider: str, token: str, target_origin: str | None) -> "CompletionPayload":
        return cls(provider, "success", {"token": token}, target_origin)

    @classmethod
    def failure(cls, provider: str, message: str, target_origin: str | None) -> "CompletionPayload":
        return cls(provider, "error", {"message": message}, target_origin)


@dataclass(frozen=True, slots=True)
class CallbackResponse:
    """OAuth 콜백 결과.

    성공/실패 모두 payload로 opener에 전달됩니다. error는 HTTP 상태 결정용입니다.
    """

    payload: CompletionPayload
    error: ApplicationError | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None
