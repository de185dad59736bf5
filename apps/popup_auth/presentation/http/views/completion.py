"""Completion Messenger.

팝업 창에서 실행되어 opener 창으로 결과를 전달하는 HTML/스크립트를 생성합니다.

Handshake (opener 쪽은 동일한 문자열 형식을 구현해야 함):
    1. 팝업 → opener: "authorizing:<provider>"        (targetOrigin = trust origin 또는 "*")
    2. opener → 팝업: 같은 문자열을 그대로 되돌려 보냄 (리스너가 붙어 있음을 증명)
    3. 팝업 → opener: "authorization:<provider>:<status>:<json>"  (targetOrigin = 2단계 event.origin)

2단계 메시지는 opener 창에서 온 것이어야 하며, trust origin이 있으면
event.origin도 일치해야 합니다. 팝업의 리스너는 한 번 응답한 뒤 제거됩니다.
trust origin이 없으면 1단계 신호만 "*"로 전송됩니다 (호환성 유지를 위한 잔여 위험).
결과 메시지는 항상 응답한 opener의 실제 origin으로만 전송됩니다.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.popup_auth.application.oauth.dto import CompletionPayload

SIGNAL_PREFIX = "authorizing:"
MESSAGE_PREFIX = "authorization:"
BROADCAST_ORIGIN = "*"

# <script> 블록 안에서 안전하게 쓰기 위한 이스케이프
_SCRIPT_ESCAPES = str.maketrans(
    {
        "<": "\\u003c",
        ">": "\\u003e",
        "&": "\\u0026",
    }
)

_COMPLETION_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Authorizing</title></head>
<body>
<script>
(function () {{
  var opener = window.opener;
  if (!opener) {{
    return;
  }}
  var signal = {signal};
  var message = {message};
  var targetOrigin = {target_origin};
  function receive(event) {{
    if (event.source !== opener || event.data !== signal) {{
      return;
    }}
    if (targetOrigin !== "*" && event.origin !== targetOrigin) {{
      return;
    }}
    window.removeEventListener("message", receive);
    opener.postMessage(message, event.origin);
  }}
  window.addEventListener("message", receive);
  opener.postMessage(signal, targetOrigin);
}})();
</script>
</body>
</html>
"""


def completion_signal(provider: str) -> str:
    """1단계 신호 문자열."""
    return f"{SIGNAL_PREFIX}{provider}"


def completion_message(payload: "CompletionPayload") -> str:
    """3단계 결과 문자열. JSON은 JS의 JSON.stringify와 같은 형식(공백 없음)."""
    content = json.dumps(payload.content, separators=(",", ":"), ensure_ascii=False)
    return f"{MESSAGE_PREFIX}{payload.provider}:{payload.status}:{content}"


def _script_literal(value: str) -> str:
    return json.dumps(value).translate(_SCRIPT_ESCAPES)


class CompletionMessenger:
    """완료 페이지 렌더러."""

    def render(self, payload: "CompletionPayload") -> str:
        """완료 payload를 handshake 스크립트가 담긴 HTML로 렌더링."""
        return _COMPLETION_HTML.format(
            signal=_script_literal(completion_signal(payload.provider)),
            message=_script_literal(completion_message(payload)),
            target_origin=_script_literal(payload.target_origin or BROADCAST_ORIGIN),
        )
