"""Application Settings.

환경변수에서 로드되는 불변(frozen) 설정입니다.
env_prefix="POPUP_AUTH_" 사용, 기존 배포의 환경변수 이름(SECRET 등)도 AliasChoices로 허용합니다.

예시:
    POPUP_AUTH_SECRET 또는 SECRET → secret
    POPUP_AUTH_ALLOW_SITE_ID_LIST 또는 ALLOW_SITE_ID_LIST → allow_site_id_list
"""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# 로컬 개발용 기본 허용 사이트
DEFAULT_SITE_ID_LIST = ("localhost", "127.0.0.1")


class Settings(BaseSettings):
    """애플리케이션 설정.

    프로세스 시작 시 한 번 로드되며 이후 변경되지 않습니다 (frozen).
    """

    # Service
    app_name: str = "Popup Auth"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # Sites
    allow_site_id_list: str = Field(
        default="",
        validation_alias=AliasChoices("POPUP_AUTH_ALLOW_SITE_ID_LIST", "ALLOW_SITE_ID_LIST"),
    )
    require_trusted_referer: bool = False

    # State (CSRF)
    secret: str = Field(validation_alias=AliasChoices("POPUP_AUTH_SECRET", "SECRET"))
    state_token_mode: Literal["signed", "random"] = "signed"
    state_ttl_seconds: int = Field(default=180, gt=0, le=180)

    # Callback URL 생성용 (프록시 뒤에서 request origin을 신뢰할 수 없을 때)
    public_base_url: Optional[str] = None

    # OAuth Providers - GitHub
    github_oauth_id: str = Field(
        default="",
        validation_alias=AliasChoices("POPUP_AUTH_GITHUB_OAUTH_ID", "GITHUB_OAUTH_ID"),
    )
    github_oauth_secret: str = Field(
        default="",
        validation_alias=AliasChoices("POPUP_AUTH_GITHUB_OAUTH_SECRET", "GITHUB_OAUTH_SECRET"),
    )
    github_base_url: str = "https://github.com"

    # OAuth Providers - GitLab
    gitlab_oauth_id: str = Field(
        default="",
        validation_alias=AliasChoices("POPUP_AUTH_GITLAB_OAUTH_ID", "GITLAB_OAUTH_ID"),
    )
    gitlab_oauth_secret: str = Field(
        default="",
        validation_alias=AliasChoices("POPUP_AUTH_GITLAB_OAUTH_SECRET", "GITLAB_OAUTH_SECRET"),
    )
    gitlab_base_url: str = "https://gitlab.com"

    oauth_timeout_seconds: float = 10.0

    # OpenTelemetry (prefix 없이 직접 매핑)
    otel_enabled: bool = False
    otel_service_name: str = Field(
        default="popup-auth",
        validation_alias=AliasChoices("OTEL_SERVICE_NAME", "POPUP_AUTH_OTEL_SERVICE_NAME"),
    )
    otel_exporter_endpoint: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices(
            "OTEL_EXPORTER_OTLP_ENDPOINT", "POPUP_AUTH_OTEL_EXPORTER_ENDPOINT"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="POPUP_AUTH_",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
        populate_by_name=True,
    )

    @field_validator("secret")
    @classmethod
    def _secret_not_blank(cls, value: str) -> str:
        """빈 secret 거부."""
        if not value or not value.strip():
            raise ValueError("secret must not be empty")
        return value

    @field_validator("public_base_url", mode="before")
    @classmethod
    def _empty_string_to_none(cls, value: Optional[str]):
        """빈 문자열을 None으로 변환."""
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("github_base_url", "gitlab_base_url", "public_base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: Optional[str]) -> Optional[str]:
        return value.rstrip("/") if value else value

    @property
    def allowed_site_ids(self) -> frozenset[str]:
        """허용 사이트 목록 (설정값 + 로컬 개발 기본값)."""
        configured = (item.strip() for item in self.allow_site_id_list.split(","))
        return frozenset(item for item in configured if item) | frozenset(DEFAULT_SITE_ID_LIST)


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()
