"""
Identity service for secure access gateway.

Owns the session state: API key log in, the signed session cookie, and the
login/logout URLs. The access gate only reads ``is_authenticated``.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Optional
from urllib.parse import urlencode

from fastapi import Request, Response
from jose import JWTError, jwt

from core.config import settings
from utils.urls import build_logout_url, strip_redirect_param

logger = logging.getLogger(__name__)


class IdentityService:
    """身分服務類"""

    def verify_api_key(self, api_key: Optional[str]) -> bool:
        """驗證登入用 API Key"""
        if not api_key:
            return False
        return api_key in settings.api_keys_list

    def create_session_token(self, username: str, expires_delta: Optional[timedelta] = None) -> str:
        """創建 session JWT token"""
        if expires_delta:
            expire = datetime.now(timezone.utc) + expires_delta
        else:
            expire = datetime.now(timezone.utc) + timedelta(minutes=settings.jwt_access_token_expire_minutes)

        to_encode = {"sub": username, "exp": expire}
        return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

    def current_user(self, request: Request) -> Optional[str]:
        """從 session cookie 取得目前使用者，無效時回傳 None"""
        token = request.cookies.get(settings.session_cookie_name)
        if not token:
            return None

        try:
            payload = jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
        except JWTError as e:
            logger.debug(f"session token 無效: {e}")
            return None

        return payload.get("sub")

    def is_authenticated(self, request: Request) -> bool:
        return self.current_user(request) is not None

    def login_redirect_url(self, request: Request) -> str:
        """產生導向登入頁面的 URL，並帶上原本的目標"""
        target = request.url.path
        if request.url.query:
            target = f"{target}?{request.url.query}"
        return f"{settings.login_route}?{urlencode({'redirect_to': target, 'reauth': '1'})}"

    def logout_url(self, redirect: str = "") -> str:
        """產生登出 URL（已移除 redirect_to 參數）"""
        return strip_redirect_param(build_logout_url(settings.login_route, redirect), redirect)

    def set_session_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            settings.session_cookie_name,
            token,
            max_age=settings.jwt_access_token_expire_minutes * 60,
            httponly=True,
            secure=settings.cookie_secure,
            samesite="lax",
        )

    def clear_session_cookie(self, response: Response) -> None:
        response.delete_cookie(settings.session_cookie_name)


# 全局身分服務實例
identity_service = IdentityService()
