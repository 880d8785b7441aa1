"""Tests for the remote capability interfaces."""

import pytest

from modules.auth.client import HttpAuthApi
from modules.auth.interfaces import IAuthApi
from modules.notes.interfaces import INotesApi
from modules.profile.interfaces import IProfileApi
from modules.session.interfaces import ISessionApi


class TestAuthInterface:
    def test_interface_methods_exist(self):
        """IAuthApi should define every remote auth call."""
        methods = [
            "login",
            "send_login_otp",
            "verify_login_otp",
            "signup",
            "verify_signup_otp",
            "resend_signup_otp",
            "set_access_token",
            "clear_access_token",
        ]
        for method in methods:
            assert hasattr(IAuthApi, method)
            assert callable(getattr(HttpAuthApi, method))

    def test_fake_satisfies_interface(self, auth_api):
        """The AsyncMock fake used by the controller tests is an IAuthApi."""
        assert isinstance(auth_api, IAuthApi)


class TestOtherInterfaces:
    @pytest.mark.parametrize(
        "interface, fake_name",
        [
            (ISessionApi, "session_api"),
            (INotesApi, "notes_api"),
            (IProfileApi, "profile_api"),
        ],
    )
    def test_fakes_satisfy_interfaces(self, request, interface, fake_name):
        """Each fake should be usable where its interface is expected."""
        assert isinstance(request.getfixturevalue(fake_name), interface)
