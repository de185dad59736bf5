"""Health Controller."""

from fastapi import APIRouter, Depends

from apps.popup_auth.setup.config import Settings, get_settings

router = APIRouter()

SERVICE_NAME = "popup-auth"


@router.get("/health", include_in_schema=False)
async def health(settings: Settings = Depends(get_settings)):
    """헬스체크."""
    return {"status": "healthy", "service": SERVICE_NAME, "version": settings.service_version}
