"""
Authentication module exceptions.

These never leave the AuthFlowController; it turns them into an
AuthOutcome, a state update and one notification.
"""

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from shared.exceptions import NotesClientError, ValidationError

# User-facing text per field, used instead of pydantic's generic messages
FIELD_MESSAGES = {
    "email": "Invalid email",
    "password": "Password too short",
    "code": "OTP must be 6 digits",
    "name": "Name is too short",
    "dob": "Invalid date of birth",
}

# Fields whose validators raise ValueError with their own user-facing text
CUSTOM_VALIDATED_FIELDS = ("name", "dob")


class InvalidCredentialsError(ValidationError):
    """Raised when form input fails validation before submission."""

    def __init__(self, fields: dict[str, str]):
        first = next(iter(fields.values()), "Invalid input")
        super().__init__(
            first,
            code="INVALID_CREDENTIALS",
            details={"fields": fields},
        )

    @classmethod
    def from_pydantic(cls, error: PydanticValidationError) -> "InvalidCredentialsError":
        fields: dict[str, str] = {}
        for item in error.errors(include_url=False):
            loc: tuple[Any, ...] = item.get("loc", ())
            # Discriminated unions prefix the location with the tag; the field is last.
            field = next(
                (part for part in reversed(loc) if isinstance(part, str) and part in FIELD_MESSAGES),
                None,
            )
            if field is None:
                field = str(loc[-1]) if loc else "input"
            fields.setdefault(field, _field_message(field, item))
        return cls(fields)


def _field_message(field: str, item: dict[str, Any]) -> str:
    # Messages raised by our own validators are already user-facing.
    if item.get("type") == "value_error" and field in CUSTOM_VALIDATED_FIELDS:
        return str(item.get("msg", "")).removeprefix("Value error, ")
    return FIELD_MESSAGES.get(field, str(item.get("msg", "Invalid value")))


class MissingEmailError(ValidationError):
    """Raised when a code is requested before an email was entered."""

    def __init__(self) -> None:
        super().__init__(
            "Enter your email first",
            code="MISSING_EMAIL",
            details={"fields": {"email": "Enter your email first"}},
        )


class OtpCooldownActiveError(NotesClientError):
    """Raised when a new code is requested inside the cooldown window."""

    def __init__(self, remaining: int):
        super().__init__(
            f"Please wait {remaining}s before requesting a new code",
            code="OTP_COOLDOWN_ACTIVE",
            details={"cooldown_remaining": remaining},
        )
        self.remaining = remaining


class UnexpectedLoginStatusError(NotesClientError):
    """Raised when login answers 2xx but neither 200 nor 204."""

    def __init__(self, status_code: int):
        super().__init__(
            "Invalid credentials",
            code="UNEXPECTED_LOGIN_STATUS",
            details={"status_code": status_code},
        )
