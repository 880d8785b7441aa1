"""
Authentication module.

Password and one-time-code login, signup with emailed confirmation codes,
and the resend cooldown.

Public API:
- AuthFlowController: Login/signup state machine
- IAuthApi / HttpAuthApi: Remote auth capability
- OtpCooldown: Resend throttling countdown
- Credentials, PasswordCredentials, OtpCredentials, SignupRequest: Input models
- AuthFlowState, AuthOutcome, AuthStatus, LoginMethod: State models
- Auth exceptions: InvalidCredentialsError, OtpCooldownActiveError, etc.
"""

from .interfaces import IAuthApi
from .models import (
    AuthFlowState,
    AuthOutcome,
    AuthStatus,
    Credentials,
    CredentialsDraft,
    LoginMethod,
    OtpCredentials,
    OtpRequest,
    OtpRequestWindow,
    PasswordCredentials,
    SignupRequest,
    TokenGrant,
)
from .exceptions import (
    InvalidCredentialsError,
    MissingEmailError,
    OtpCooldownActiveError,
    UnexpectedLoginStatusError,
)
from .cooldown import OtpCooldown
from .service import AuthFlowController
from .client import HttpAuthApi

__all__ = [
    # Interface
    "IAuthApi",
    # Models
    "AuthFlowState",
    "AuthOutcome",
    "AuthStatus",
    "Credentials",
    "CredentialsDraft",
    "LoginMethod",
    "OtpCredentials",
    "OtpRequest",
    "OtpRequestWindow",
    "PasswordCredentials",
    "SignupRequest",
    "TokenGrant",
    # Exceptions
    "InvalidCredentialsError",
    "MissingEmailError",
    "OtpCooldownActiveError",
    "UnexpectedLoginStatusError",
    # Implementations
    "OtpCooldown",
    "AuthFlowController",
    "HttpAuthApi",
]
