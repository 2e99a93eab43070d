"""
Unit tests for login page presentation service.
"""
import pytest

from models.login import NoticeCollection, NoticeSeverity
from services.login_page_service import (
    LoginPageService,
    SECURE_ACCESS_CODE,
    SECURE_ACCESS_MESSAGE,
    decorate_login_errors,
    resolve_login_message,
)


class TestResolveLoginMessage:
    """Test cases for the login message latch"""

    def test_empty_message_keeps_errors_filter(self):
        """Test empty message leaves the errors filter active"""
        assert resolve_login_message("", True) == ("", True)

    def test_custom_message_disables_errors_filter(self):
        """Test non-empty message is returned unchanged and latches the filter off"""
        assert resolve_login_message("custom text", True) == ("custom text", False)

    def test_latch_cannot_be_reenabled(self):
        """Test an empty message never switches the filter back on"""
        assert resolve_login_message("", False) == ("", False)


class TestDecorateLoginErrors:
    """Test cases for the default log in notice"""

    def test_adds_notice_to_empty_collection(self):
        """Test notice is appended when nothing else is queued"""
        notices = NoticeCollection()

        result = decorate_login_errors(notices)

        assert result is notices
        assert len(notices) == 1
        notice = list(notices)[0]
        assert notice.code == SECURE_ACCESS_CODE
        assert notice.message == SECURE_ACCESS_MESSAGE
        assert notice.severity == NoticeSeverity.NOTICE

    def test_second_call_adds_nothing(self):
        """Test decoration is idempotent after the first application"""
        notices = NoticeCollection()

        decorate_login_errors(notices)
        decorate_login_errors(notices)

        assert notices.get_error_codes() == [SECURE_ACCESS_CODE]

    def test_pending_error_suppresses_notice(self):
        """Test a pending single-slot error suppresses the notice"""
        notices = decorate_login_errors(NoticeCollection(), pending_error="Session expired.")

        assert len(notices) == 0

    def test_queued_notice_suppresses_notice(self):
        """Test an already queued notice suppresses the default one"""
        notices = NoticeCollection()
        notices.add("loggedout", "You are now logged out.", NoticeSeverity.NOTICE)

        decorate_login_errors(notices)

        assert notices.get_error_codes() == ["loggedout"]


class TestLoginPageService:
    """Test cases for the login page pipeline"""

    def test_register_filters_on_login_route(self):
        """Test filters are registered for the login action on the login route"""
        filters = LoginPageService().register_login_message_filters("/login", "login")

        assert filters.message_filter is True
        assert filters.errors_filter is True

    @pytest.mark.parametrize("route_id,action", [
        ("/signup", "login"),
        ("/dashboard", "login"),
        ("/login", "lostpassword"),
        ("/login", "logout"),
    ])
    def test_register_filters_elsewhere(self, route_id, action):
        """Test filters stay inactive outside the login action"""
        filters = LoginPageService().register_login_message_filters(route_id, action)

        assert filters.message_filter is False
        assert filters.errors_filter is False

    def test_empty_action_counts_as_login(self):
        """Test empty action is treated as the login action"""
        filters = LoginPageService().register_login_message_filters("/login", "")

        assert filters.errors_filter is True

    def test_build_adds_default_notice(self):
        """Test pipeline adds the default notice when nothing else is shown"""
        page = LoginPageService().build("/login")

        assert page.message == ""
        assert [n.code for n in page.notices] == [SECURE_ACCESS_CODE]

    def test_build_with_custom_message(self):
        """Test custom message takes precedence over the default notice"""
        page = LoginPageService().build("/login", candidate_message="Welcome back")

        assert page.message == "Welcome back"
        assert page.notices == []
        assert page.filters.errors_filter is False

    def test_build_with_pending_error(self):
        """Test pending error takes precedence over the default notice"""
        page = LoginPageService().build("/login", pending_error="Session expired.")

        assert page.pending_error == "Session expired."
        assert page.notices == []

    def test_build_keeps_existing_notices(self):
        """Test existing notices are kept and not decorated"""
        notices = NoticeCollection()
        notices.add("invalid_api_key", "Invalid API Key.")

        page = LoginPageService().build("/login", notices=notices)

        assert [n.code for n in page.notices] == ["invalid_api_key"]

    def test_build_other_action_is_untouched(self):
        """Test other login screen actions get no default notice"""
        page = LoginPageService().build("/login", action="lostpassword", candidate_message="Hi")

        assert page.message == "Hi"
        assert page.notices == []
