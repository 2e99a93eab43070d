"""
Login page presentation service for secure access gateway.

Runs the login screen adjustments in a fixed order:

1. register the message/errors filters (login screen, ``login`` action only)
2. resolve the login message; a non-empty message latches the errors
   filter off for the rest of the request
3. decorate the notice collection with the default log in notice
"""
import logging
from typing import Optional, Tuple

from core.config import settings
from core.i18n import translate
from models.login import LoginFilterState, LoginPageContext, NoticeCollection, NoticeSeverity

logger = logging.getLogger(__name__)

SECURE_ACCESS_CODE = "secureaccess"
SECURE_ACCESS_MESSAGE = "Please log in to view this site."

# 隱藏登入頁面標題與返回網站連結
LOGIN_HEAD_STYLE = '<style type="text/css">#login>h1:first-child,#backtoblog{display:none}</style>'


def resolve_login_message(candidate_message: str, errors_filter: bool) -> Tuple[str, bool]:
    """
    Return the candidate message unchanged along with the updated errors
    filter flag.

    A non-empty message comes from another source and takes precedence, so
    the default notice must not be added afterwards. The flag can only be
    switched off here, never back on.
    """
    if candidate_message:
        errors_filter = False
    return candidate_message, errors_filter


def decorate_login_errors(notices: NoticeCollection, pending_error: Optional[str] = None) -> NoticeCollection:
    """
    沒有其他訊息時加入預設的登入提示

    Args:
        notices: 登入頁面的通知集合
        pending_error: 其他來源設定的單一錯誤訊息（可選）

    Returns:
        NoticeCollection: 同一個通知集合
    """
    if not pending_error and not notices.get_error_code():
        notices.add(SECURE_ACCESS_CODE, translate(SECURE_ACCESS_MESSAGE), NoticeSeverity.NOTICE)
    return notices


class LoginPageService:
    """登入頁面呈現服務類"""

    def __init__(self, login_route: Optional[str] = None):
        self.login_route = login_route or settings.login_route

    def register_login_message_filters(self, route_id: str, action: str = "login") -> LoginFilterState:
        """僅在登入頁面的 login 動作啟用兩個調整"""
        if route_id != self.login_route or (action or "login") != "login":
            return LoginFilterState()
        return LoginFilterState(message_filter=True, errors_filter=True)

    def build(
        self,
        route_id: str,
        action: str = "login",
        candidate_message: str = "",
        notices: Optional[NoticeCollection] = None,
        pending_error: str = ""
    ) -> LoginPageContext:
        """依固定順序執行登入頁面調整並回傳渲染內容"""
        if notices is None:
            notices = NoticeCollection()

        filters = self.register_login_message_filters(route_id, action)
        message = candidate_message

        if filters.message_filter:
            message, filters.errors_filter = resolve_login_message(message, filters.errors_filter)

        if filters.errors_filter:
            notices = decorate_login_errors(notices, pending_error)

        logger.debug(f"登入頁面通知: {notices.get_error_codes()} (message={'yes' if message else 'no'})")

        return LoginPageContext(
            message=message,
            pending_error=pending_error,
            notices=list(notices),
            filters=filters,
        )


# 全局登入頁面服務實例
login_page_service = LoginPageService()
