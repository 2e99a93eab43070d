"""
Login screen endpoints for secure access gateway.

Contains the log in, log out and reauth handling of the login route.
"""
import logging
from fastapi import APIRouter, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from starlette.status import HTTP_302_FOUND, HTTP_401_UNAUTHORIZED

from core.config import settings
from core.i18n import translate
from core.templating import templates
from models.login import NoticeCollection, NoticeSeverity
from services.identity_service import identity_service
from services.login_page_service import LOGIN_HEAD_STYLE, login_page_service
from utils.urls import safe_redirect_target

# 設置 logger
logger = logging.getLogger(__name__)

router = APIRouter()


def render_login_page(
    request: Request,
    action: str,
    notices: NoticeCollection,
    redirect_to: str = "",
    status_code: int = 200
):
    """執行登入頁面調整並渲染登入頁面"""
    page = login_page_service.build(
        route_id=request.url.path,
        action=action,
        candidate_message=settings.login_message,
        notices=notices,
        pending_error=getattr(request.state, "login_error", "") or "",
    )
    return templates.TemplateResponse(
        request,
        "login.html",
        {
            "page": page,
            "redirect_to": redirect_to,
            "login_head_style": LOGIN_HEAD_STYLE,
            "login_route": settings.login_route,
            "signup_route": settings.signup_route,
        },
        status_code=status_code,
    )


@router.get(settings.login_route, response_class=HTMLResponse, name="login")
async def login_page(
    request: Request,
    action: str = "login",
    redirect_to: str = "",
    reauth: str = "",
    loggedout: str = ""
):
    """登入頁面"""
    if action == "logout":
        default = f"{settings.login_route}?loggedout=true"
        target = safe_redirect_target(redirect_to, default=default) if redirect_to else default
        response = RedirectResponse(target, status_code=HTTP_302_FOUND)
        identity_service.clear_session_cookie(response)
        logger.info("使用者登出")
        return response

    # 不開放自行註冊，交由註冊頁面說明
    if action == "register":
        return RedirectResponse(settings.signup_route, status_code=HTTP_302_FOUND)

    notices = NoticeCollection()
    if loggedout == "true":
        notices.add("loggedout", translate("You are now logged out."), NoticeSeverity.NOTICE)

    response = render_login_page(request, action, notices, redirect_to)

    # 重新驗證時清除舊的 session
    if reauth == "1":
        identity_service.clear_session_cookie(response)

    return response


@router.post(settings.login_route, response_class=HTMLResponse)
async def login_submit(
    request: Request,
    api_key: str = Form(""),
    username: str = Form("api_user"),
    redirect_to: str = Form("")
):
    """使用 API Key 登入並設定 session cookie"""
    if not identity_service.verify_api_key(api_key):
        logger.warning("登入驗證失敗: Invalid API Key")
        notices = NoticeCollection()
        notices.add("invalid_api_key", translate("Invalid API Key."), NoticeSeverity.ERROR)
        return render_login_page(request, "login", notices, redirect_to, status_code=HTTP_401_UNAUTHORIZED)

    username = username or "api_user"
    token = identity_service.create_session_token(username)

    response = RedirectResponse(safe_redirect_target(redirect_to), status_code=HTTP_302_FOUND)
    identity_service.set_session_cookie(response, token)
    logger.info(f"登入驗證通過: {username}")
    return response
