"""
Access gate service for secure access gateway.

Decides, for every request, whether it may continue or must be sent to the
login screen. The login and signup routes are the only bypass.
"""
import logging
from typing import Optional, Tuple

from core.config import settings
from models.gate import GateAction

logger = logging.getLogger(__name__)


class GateService:
    """存取閘道服務類"""

    def __init__(self, login_route: Optional[str] = None, signup_route: Optional[str] = None):
        self.login_route = login_route or settings.login_route
        self.signup_route = signup_route or settings.signup_route

    @property
    def bypass_routes(self) -> Tuple[str, str]:
        return (self.login_route, self.signup_route)

    def should_bypass_gate(self, route_id: str) -> bool:
        """登入與註冊頁面不需檢查（大小寫敏感的完全比對）"""
        return route_id in self.bypass_routes

    def enforce(self, route_id: str, is_authenticated: bool) -> GateAction:
        """
        決定請求是否可繼續

        Args:
            route_id: 目前請求的路由
            is_authenticated: 使用者是否已登入

        Returns:
            GateAction: CONTINUE 或 REDIRECT_TO_LOGIN
        """
        if self.should_bypass_gate(route_id):
            return GateAction.CONTINUE

        if not is_authenticated:
            return GateAction.REDIRECT_TO_LOGIN

        return GateAction.CONTINUE


# 全局閘道服務實例
gate_service = GateService()
