"""
URL utilities for secure access gateway.

Contains helpers for building and cleaning up login/logout URLs.
"""
from html import escape
from urllib.parse import quote_plus


def urlencode_value(value: str) -> str:
    """以 PHP urlencode 相同規則編碼（"~" 也編碼為 %7E）"""
    return quote_plus(value, safe="").replace("~", "%7E")


def strip_redirect_param(logout_url: str, redirect_target: str = "") -> str:
    """
    移除登出 URL 中的 redirect_to 參數

    The site redirects every page back to the login screen anyway, so keeping
    the redirect target only bounces the user straight to a login form after
    logging out. The logout URL is already HTML escaped at this point.

    Args:
        logout_url: HTML 跳脫過的登出 URL
        redirect_target: 登出後原本要導向的 URL（可選）

    Returns:
        str: 處理後的登出 URL
    """
    if not redirect_target:
        return logout_url

    # 順序不可調換：移除參數後才會產生後兩者要清理的分隔符
    logout_url = logout_url.replace("redirect_to=" + urlencode_value(redirect_target), "")
    logout_url = logout_url.replace("?&amp;", "?")
    logout_url = logout_url.replace("&amp;&amp;", "&amp;")
    return logout_url


def build_logout_url(login_route: str, redirect_target: str = "") -> str:
    """產生 HTML 跳脫過的登出 URL"""
    query = "action=logout"
    if redirect_target:
        query = f"redirect_to={urlencode_value(redirect_target)}&{query}"
    return escape(f"{login_route}?{query}")


def safe_redirect_target(target: str, default: str = "/") -> str:
    """只允許站內絕對路徑，避免開放式重導"""
    if not target or not target.startswith("/") or target.startswith("//") or "\\" in target:
        return default
    return target
