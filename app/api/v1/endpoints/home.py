"""
Home and status endpoints for secure access gateway.

Every route here sits behind the access gate.
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from core.config import settings
from core.templating import templates
from services.identity_service import identity_service

router = APIRouter()


@router.get("/", response_class=HTMLResponse, name="home")
async def home(request: Request):
    """首頁"""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "user": identity_service.current_user(request),
            "logout_url": identity_service.logout_url(str(request.url)),
        },
    )


@router.get("/dashboard", response_model=dict)
async def dashboard(request: Request):
    """服務狀態檢查"""
    return {
        "service": settings.site_name,
        "status": "running",
        "version": "1.0.0",
        "user": identity_service.current_user(request),
    }
