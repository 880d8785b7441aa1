"""
Base exception classes for the notes client core.

Each module should define its own exceptions that inherit from these bases.
Public operations catch them at their boundary and turn them into a
notification plus a state update, so none of them reaches the presentation
layer as an unhandled error.
"""

from typing import Optional, Any


class NotesClientError(Exception):
    """
    Base exception for all notes client errors.

    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a dictionary for logging and notifications."""
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(NotesClientError):
    """Input validation failed before any remote call was made."""

    pass


class RemoteError(NotesClientError):
    """
    Non-success response or transport failure from the remote API.

    ``server_message`` holds the human-readable message from the response
    body when the server supplied one; callers prefer it over their own
    generic fallback.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        server_message: Optional[str] = None,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message, code, details)
        self.status_code = status_code
        self.server_message = server_message
        if status_code is not None:
            self.details["status_code"] = status_code

    def user_message(self, fallback: str) -> str:
        """Message to show the user: the server's own, else the fallback."""
        return self.server_message or fallback


class SessionTimeoutError(NotesClientError):
    """Raised when the session bootstrap deadline elapses first."""

    def __init__(self, timeout_ms: int):
        super().__init__(
            f"Session refresh did not settle within {timeout_ms} ms",
            code="SESSION_TIMEOUT",
            details={"timeout_ms": timeout_ms},
        )


def user_message(error: BaseException, fallback: str) -> str:
    """
    Message to surface to the user for ``error``.

    Remote errors prefer the server-supplied message; validation errors carry
    their own; anything else gets the operation's generic fallback.
    """
    if isinstance(error, RemoteError):
        return error.user_message(fallback)
    if isinstance(error, ValidationError):
        return error.message
    return fallback
