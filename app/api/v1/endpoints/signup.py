"""
Signup screen endpoint for secure access gateway.
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from core.config import settings
from core.templating import templates
from services.login_page_service import LOGIN_HEAD_STYLE

router = APIRouter()


@router.get(settings.signup_route, response_class=HTMLResponse, name="signup")
async def signup_page(request: Request):
    """註冊頁面（不開放自行註冊）"""
    return templates.TemplateResponse(
        request,
        "signup.html",
        {
            "login_head_style": LOGIN_HEAD_STYLE,
            "login_route": settings.login_route,
        },
    )
