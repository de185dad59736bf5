"""OAuth Provider Name."""

from __future__ import annotations

from enum import Enum


class OAuthProviderName(str, Enum):
    """지원하는 OAuth 프로바이더 (닫힌 집합)."""

    github = "github"
    gitlab = "gitlab"

    @classmethod
    def parse(cls, value: str | None) -> "OAuthProviderName | None":
        """문자열을 프로바이더로 변환. 지원하지 않으면 None."""
        if not value:
            return None
        try:
            return cls(value)
        except ValueError:
            return None
