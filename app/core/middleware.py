"""
Access gate middleware for secure access gateway.

Every request passes through the gate before any route handler runs.
"""
import logging

from fastapi import Request
from fastapi.responses import RedirectResponse
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.status import HTTP_302_FOUND

from models.gate import GateAction
from services.gate_service import gate_service
from services.identity_service import identity_service

logger = logging.getLogger(__name__)

NO_CACHE_HEADERS = {
    "Cache-Control": "no-cache, must-revalidate, max-age=0",
}


class SecureAccessMiddleware(BaseHTTPMiddleware):
    """
    Redirects unauthenticated visitors to the login screen.

    The login and signup routes are the only exceptions; static files, API
    and docs routes are gated as well.
    """

    async def dispatch(self, request: Request, call_next):
        route_id = request.url.path

        # 登入/註冊頁面不需檢查登入狀態
        if gate_service.should_bypass_gate(route_id):
            logger.debug(f"閘道略過: {route_id}")
            return await call_next(request)

        action = gate_service.enforce(route_id, identity_service.is_authenticated(request))
        logger.debug(f"閘道決策: {route_id} -> {action.value}")

        if action == GateAction.REDIRECT_TO_LOGIN:
            login_url = identity_service.login_redirect_url(request)
            logger.info(f"未登入，導向登入頁面: {route_id}")
            return RedirectResponse(login_url, status_code=HTTP_302_FOUND, headers=NO_CACHE_HEADERS)

        return await call_next(request)
