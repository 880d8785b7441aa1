"""Tests for modules/auth/models.py and the validation error mapping."""

from datetime import date, timedelta

import pytest
from pydantic import TypeAdapter, ValidationError

from modules.auth.exceptions import InvalidCredentialsError
from modules.auth.models import (
    AuthFlowState,
    Credentials,
    CredentialsDraft,
    LoginMethod,
    OtpCredentials,
    PasswordCredentials,
    SignupRequest,
    TokenGrant,
)

credentials = TypeAdapter(Credentials)


def field_errors(exc: ValidationError) -> dict[str, str]:
    return InvalidCredentialsError.from_pydantic(exc).details["fields"]


class TestCredentials:
    def test_password_branch(self):
        """method=password should parse into PasswordCredentials."""
        parsed = credentials.validate_python(
            {"method": "password", "email": "a@example.com", "password": "secret1"}
        )
        assert isinstance(parsed, PasswordCredentials)
        assert parsed.keep_signed_in is True

    def test_otp_branch(self):
        """method=otp should parse into OtpCredentials."""
        parsed = credentials.validate_python(
            {"method": "otp", "email": "a@example.com", "code": "123456"}
        )
        assert isinstance(parsed, OtpCredentials)

    def test_password_is_hidden_from_repr(self):
        """Passwords never appear in repr (and therefore in logs)."""
        parsed = PasswordCredentials(email="a@example.com", password="secret1")
        assert "secret1" not in repr(parsed)

    @pytest.mark.parametrize(
        "data, field, message",
        [
            ({"method": "password", "email": "nope", "password": "secret1"}, "email", "Invalid email"),
            ({"method": "password", "email": "a@example.com", "password": "123"}, "password", "Password too short"),
            ({"method": "otp", "email": "a@example.com", "code": "12345"}, "code", "OTP must be 6 digits"),
            ({"method": "otp", "email": "a@example.com", "code": "12345a"}, "code", "OTP must be 6 digits"),
        ],
    )
    def test_invalid_input_messages(self, data, field, message):
        """Field errors map to user-facing messages."""
        with pytest.raises(ValidationError) as exc_info:
            credentials.validate_python(data)
        assert field_errors(exc_info.value)[field] == message


class TestSignupRequest:
    def test_valid_request(self):
        """A valid signup request strips the name and keeps dob."""
        request = SignupRequest(name="  Ada ", email="ada@example.com", password="secret1", dob=date(1990, 1, 2))
        assert request.name == "Ada"
        assert request.model_dump(mode="json")["dob"] == "1990-01-02"

    def test_dob_is_optional(self):
        """dob may be omitted and is then left out of the body."""
        request = SignupRequest(name="Ada", email="ada@example.com", password="secret1")
        assert "dob" not in request.model_dump(mode="json", exclude_none=True)

    @pytest.mark.parametrize("name", ["A", "  a  "])
    def test_short_name(self, name):
        """Names shorter than two characters are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SignupRequest(name=name, email="ada@example.com", password="secret1")
        assert field_errors(exc_info.value)["name"] == "Name is too short"

    def test_future_dob(self):
        """A date of birth in the future is rejected."""
        with pytest.raises(ValidationError) as exc_info:
            SignupRequest(
                name="Ada",
                email="ada@example.com",
                password="secret1",
                dob=date.today() + timedelta(days=1),
            )
        assert field_errors(exc_info.value)["dob"] == "Date of birth cannot be in the future"


class TestFlowModels:
    def test_draft_defaults_to_password(self):
        """A fresh draft selects the password branch."""
        assert CredentialsDraft().method is LoginMethod.PASSWORD

    def test_state_method_follows_draft(self):
        """AuthFlowState.method reflects the draft."""
        state = AuthFlowState(draft=CredentialsDraft(method=LoginMethod.OTP))
        assert state.method is LoginMethod.OTP

    def test_token_grant_alias(self):
        """TokenGrant reads the server's accessToken field."""
        assert TokenGrant.model_validate({"accessToken": "abc"}).access_token == "abc"
