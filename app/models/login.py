"""
Login page models for secure access gateway.

Contains the notice collection shown on the login screen and the
request-scoped state of the login presentation pipeline.
"""
from enum import Enum
from typing import Iterator, List

from pydantic import BaseModel, Field


class NoticeSeverity(str, Enum):
    """通知等級"""
    ERROR = "error"
    NOTICE = "notice"


class Notice(BaseModel):
    """登入頁面通知"""
    code: str
    message: str
    severity: NoticeSeverity = NoticeSeverity.ERROR


class NoticeCollection:
    """
    An ordered collection of login screen notices.

    Codes may repeat; the first queued code is the one reported by
    ``get_error_code``.
    """

    def __init__(self):
        self._notices: List[Notice] = []

    def add(self, code: str, message: str, severity: NoticeSeverity = NoticeSeverity.ERROR) -> None:
        """加入一筆通知"""
        self._notices.append(Notice(code=code, message=message, severity=severity))

    def get_error_code(self) -> str:
        """取得第一個通知代碼，沒有通知時回傳空字串"""
        return self._notices[0].code if self._notices else ""

    def get_error_codes(self) -> List[str]:
        return [notice.code for notice in self._notices]

    def __iter__(self) -> Iterator[Notice]:
        return iter(self._notices)

    def __len__(self) -> int:
        return len(self._notices)


class LoginFilterState(BaseModel):
    """單次請求的登入頁面調整狀態"""
    message_filter: bool = False
    errors_filter: bool = False


class LoginPageContext(BaseModel):
    """登入頁面渲染內容"""
    message: str = ""
    pending_error: str = ""
    notices: List[Notice] = Field(default_factory=list)
    filters: LoginFilterState = Field(default_factory=LoginFilterState)
