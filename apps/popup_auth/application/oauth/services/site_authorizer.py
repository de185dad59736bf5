"""SiteAuthorizer - 요청 사이트 검증 서비스.

site_id가 허용 목록에 있는지 확인하고, Referer에서 trust origin을 도출합니다.

trust origin은 완료 메시지(postMessage)의 targetOrigin으로 쓰입니다.
Referer가 없거나 host가 site_id와 다르면 trust origin 없이 통과하며,
이 경우 완료 메시지는 "*"로 전송됩니다 (호환성 유지용 약화, require_trusted_referer로 차단 가능).
"""

from __future__ import annotations

import logging
from typing import Iterable

from apps.popup_auth.application.oauth.dto import SiteAuthorization
from apps.popup_auth.application.oauth.exceptions import (
    InvalidRefererError,
    InvalidSiteIdError,
)
from apps.popup_auth.domain.value_objects import Origin

logger = logging.getLogger(__name__)


class SiteAuthorizer:
    """허용 사이트 검증기.

    Args:
        allowed_site_ids: 허용 site_id 목록 (대소문자 구분, 정확히 일치)
        require_trusted_referer: True면 trust origin을 만들 수 없는 요청을 거부
    """

    def __init__(self, allowed_site_ids: Iterable[str], *, require_trusted_referer: bool = False):
        self._allowed = frozenset(allowed_site_ids)
        self._require_trusted_referer = require_trusted_referer

    def authorize(
        self,
        site_id: str | None,
        referer: str | None,
        *,
        known_origin: str | None = None,
    ) -> SiteAuthorization:
        """site_id 및 Referer 검증.

        known_origin은 이전 단계(/auth)에서 검증되어 서명 쿠키로 돌아온 trust origin입니다.
        site_id와 host가 같으면 Referer보다 우선합니다.

        Raises:
            InvalidSiteIdError: site_id 누락 또는 허용 목록에 없음
            InvalidRefererError: require_trusted_referer 모드에서 trust origin 도출 실패
        """
        if not site_id or site_id not in self._allowed:
            logger.warning("Rejected site_id", extra={"site_id": site_id})
            raise InvalidSiteIdError()

        trust_origin = self.derive_trust_origin(site_id, known_origin) or self.derive_trust_origin(
            site_id, referer
        )
        if trust_origin is None and self._require_trusted_referer:
            logger.warning("Rejected untrusted referer", extra={"site_id": site_id})
            raise InvalidRefererError()

        return SiteAuthorization(site_id=site_id, trust_origin=trust_origin)

    @staticmethod
    def derive_trust_origin(site_id: str, url: str | None) -> str | None:
        """url의 host가 site_id와 같을 때만 그 origin을 반환."""
        origin = Origin.from_url(url)
        if origin is None or origin.hostname != site_id:
            return None
        return str(origin)
