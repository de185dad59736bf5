"""Fallback Controller.

등록되지 않은 모든 경로/메서드에 고정 본문으로 418을 응답합니다.
반드시 마지막에 등록되어야 합니다.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter()

FALLBACK_BODY = "Ciallo～(∠·ω< )⌒★"
FALLBACK_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


@router.api_route("/{path:path}", methods=FALLBACK_METHODS, include_in_schema=False)
async def fallback(path: str) -> PlainTextResponse:
    return PlainTextResponse(FALLBACK_BODY, status_code=418)
