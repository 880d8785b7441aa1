"""
Auth flow controller.

Drives password login, OTP login (request / resend / verify) and the
signup + confirmation-code flow against IAuthApi, and marks the session
authenticated on success.

Every public operation returns an AuthOutcome and emits at most one
notification; none of them raise. Remote failures are terminal for that
attempt (the user re-invokes the operation). Only the local cooldown
countdown keeps running on its own.
"""

import logging
from datetime import date
from typing import Awaitable, Callable, Optional, Union

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from shared.config import Settings, get_settings
from shared.exceptions import NotesClientError, user_message
from shared.notifications import NotificationBus
from shared.state import StateContainer
from modules.session.store import SessionStore

from .cooldown import OtpCooldown
from .exceptions import (
    InvalidCredentialsError,
    MissingEmailError,
    OtpCooldownActiveError,
    UnexpectedLoginStatusError,
)
from .interfaces import IAuthApi
from .models import (
    AuthFlowState,
    AuthOutcome,
    AuthStatus,
    Credentials,
    LoginMethod,
    OtpCredentials,
    OtpRequest,
    PasswordCredentials,
    SignupRequest,
)

logger = logging.getLogger(__name__)

LOGIN_OK_STATUSES = (200, 204)

_credentials = TypeAdapter(Credentials)


def _clean_email(email: Optional[str]) -> str:
    """Emails are compared and sent without surrounding whitespace."""
    return (email or "").strip()


class AuthFlowController:
    """
    State machine behind the sign-in and signup forms.

    Login and signup share one OtpCooldown: any code sent to the user,
    whichever flow asked for it, blocks further sends until it elapses.
    """

    def __init__(
        self,
        api: IAuthApi,
        session: SessionStore,
        notifications: NotificationBus,
        settings: Optional[Settings] = None,
        cooldown: Optional[OtpCooldown] = None,
    ):
        self._api = api
        self._session = session
        self._notifications = notifications
        self._settings = settings or get_settings()
        self._state: StateContainer[AuthFlowState] = StateContainer(AuthFlowState())
        self._cooldown = cooldown or OtpCooldown(
            window_seconds=self._settings.otp_cooldown_seconds,
            tick_interval=self._settings.otp_tick_interval,
        )
        self._cooldown.listen(self._on_cooldown_change)

    # -- observation --------------------------------------------------------

    def get(self) -> AuthFlowState:
        """Get the current flow snapshot."""
        return self._state.get()

    def subscribe(self, callback: Callable[[AuthFlowState], None]) -> Callable[[], None]:
        """Observe snapshot changes; returns an unsubscribe callable."""
        return self._state.subscribe(callback)

    @property
    def cooldown(self) -> OtpCooldown:
        return self._cooldown

    # -- draft --------------------------------------------------------------

    def select_method(self, method: Union[LoginMethod, str]) -> AuthFlowState:
        """Switch between password and OTP login, keeping the typed email."""
        method = LoginMethod(method)
        state = self._state.get()
        if state.status is AuthStatus.AUTHENTICATED:
            status = state.status
        elif method is LoginMethod.OTP and state.otp_issued:
            status = AuthStatus.OTP_SENT
        else:
            status = AuthStatus.AWAITING_CREDENTIALS
        return self._state.update(
            draft=state.draft.model_copy(update={"method": method}),
            status=status,
            error=None,
        )

    def edit_draft(
        self,
        *,
        email: Optional[str] = None,
        password: Optional[str] = None,
        code: Optional[str] = None,
    ) -> AuthFlowState:
        """Record form input; both login branches read the same draft."""
        state = self._state.get()
        changes = {
            key: value
            for key, value in (("email", email), ("password", password), ("code", code))
            if value is not None
        }
        status = AuthStatus.AWAITING_CREDENTIALS if state.status is AuthStatus.IDLE else state.status
        return self._state.update(draft=state.draft.model_copy(update=changes), status=status)

    # -- password login -----------------------------------------------------

    async def submit_password(
        self,
        email: str,
        password: str,
        keep_signed_in: bool = True,
    ) -> AuthOutcome:
        """Log in with email and password."""
        op = "auth.submit_password"
        email = _clean_email(email)
        self._remember(email=email, password=password, method=LoginMethod.PASSWORD)

        try:
            credentials = self._parse_credentials(
                {
                    "method": "password",
                    "email": email,
                    "password": password,
                    "keep_signed_in": keep_signed_in,
                }
            )
        except InvalidCredentialsError as e:
            return self._reject_input(op, e)

        try:
            response = await self._api.login(credentials)
            if response.status_code not in LOGIN_OK_STATUSES:
                raise UnexpectedLoginStatusError(response.status_code)
        except Exception as e:
            return self._fail_login(op, e, "Login failed")

        return self._authenticated(op, "Login successful!")

    # -- OTP login ----------------------------------------------------------

    async def request_otp(self, email: str) -> AuthOutcome:
        """Ask the server to email a login code."""
        return await self._send_login_otp("auth.request_otp", email, "OTP sent to email", resend=False)

    async def resend_otp(self, email: str) -> AuthOutcome:
        """
        Send a fresh login code.

        While the cooldown is running this returns immediately without
        contacting the server.
        """
        if self._cooldown.active:
            return self._throttled("auth.resend_otp")
        return await self._send_login_otp("auth.resend_otp", email, "OTP resent to your email.", resend=True)

    async def verify_otp(self, email: str, code: str) -> AuthOutcome:
        """Log in with an emailed code."""
        op = "auth.verify_otp"
        email = _clean_email(email)
        self._remember(email=email, code=code)

        try:
            credentials = self._parse_credentials({"method": "otp", "email": email, "code": code})
        except InvalidCredentialsError as e:
            return self._reject_input(op, e)

        try:
            grant = await self._api.verify_login_otp(credentials.email, credentials.code)
        except Exception as e:
            message = self._log_failure(op, e, "OTP login failed")
            self._session.set_authenticated(False)
            self._api.clear_access_token()
            self._state.update(status=AuthStatus.OTP_SENT, error=message)
            self._notifications.error(op, message)
            return AuthOutcome(ok=False, message=message)

        self._api.set_access_token(grant.access_token)
        return self._authenticated(op, "OTP login successful")

    # -- signup -------------------------------------------------------------

    async def submit_signup(
        self,
        name: str,
        email: str,
        password: str,
        dob: Optional[date] = None,
    ) -> AuthOutcome:
        """Create the account; the server emails a confirmation code."""
        op = "auth.submit_signup"
        email = _clean_email(email)
        self._remember(email=email, password=password)

        try:
            request = SignupRequest(name=name, email=email, password=password, dob=dob)
        except PydanticValidationError as e:
            return self._reject_input(op, InvalidCredentialsError.from_pydantic(e))

        if self._cooldown.active:
            return self._reject_input(op, OtpCooldownActiveError(self._cooldown.remaining))

        async def call() -> None:
            await self._api.signup(request)

        return await self._send_code(
            op,
            str(request.email),
            call,
            success="OTP sent to your email!",
            fallback="Signup failed",
            changes={"signup_otp_sent": True},
        )

    async def verify_signup_otp(self, email: str, code: str) -> AuthOutcome:
        """Finalize account creation; the user then signs in normally."""
        op = "auth.verify_signup_otp"
        email = _clean_email(email)
        try:
            credentials = self._parse_credentials({"method": "otp", "email": email, "code": code})
        except InvalidCredentialsError as e:
            return self._reject_input(op, e)

        try:
            await self._api.verify_signup_otp(credentials.email, credentials.code)
        except Exception as e:
            # The server's reason is not shown for signup confirmation.
            self._log_failure(op, e, "Invalid or expired OTP")
            message = "Invalid or expired OTP"
            self._state.update(error=message)
            self._notifications.error(op, message)
            return AuthOutcome(ok=False, message=message)

        self._cooldown.cancel()
        self._state.update(signup_otp_sent=False, error=None)
        message = "Account created successfully!"
        self._notifications.success(op, message)
        return AuthOutcome(ok=True, message=message, navigate_to=self._settings.login_path)

    async def resend_signup_otp(self, email: str) -> AuthOutcome:
        """
        Send a fresh signup code.

        Gated by the same cooldown as the login resend.
        """
        op = "auth.resend_signup_otp"
        if self._cooldown.active:
            return self._throttled(op)

        try:
            request = self._otp_request(email)
        except NotesClientError as e:
            return self._reject_input(op, e)

        async def call() -> None:
            await self._api.resend_signup_otp(request)

        return await self._send_code(
            op,
            str(request.email),
            call,
            success="OTP resent to your email.",
            fallback="Failed to resend OTP",
            info=True,
        )

    # -- internals ----------------------------------------------------------

    async def _send_login_otp(self, op: str, email: str, success: str, resend: bool) -> AuthOutcome:
        email = _clean_email(email)
        self._remember(email=email, method=LoginMethod.OTP)
        try:
            request = self._otp_request(email)
        except NotesClientError as e:
            return self._reject_input(op, e)

        if self._cooldown.active:
            return self._reject_input(op, OtpCooldownActiveError(self._cooldown.remaining))

        async def call() -> None:
            await self._api.send_login_otp(request)

        return await self._send_code(
            op,
            str(request.email),
            call,
            success=success,
            fallback="Failed to resend OTP" if resend else "Failed to send OTP",
            info=resend,
            changes={"otp_issued": True, "status": AuthStatus.OTP_SENT},
        )

    async def _send_code(
        self,
        op: str,
        email: str,
        call: Callable[[], Awaitable[None]],
        *,
        success: str,
        fallback: str,
        info: bool = False,
        changes: Optional[dict] = None,
    ) -> AuthOutcome:
        try:
            await call()
        except Exception as e:
            message = self._log_failure(op, e, fallback)
            self._state.update(error=message)
            self._notifications.error(op, message)
            return AuthOutcome(ok=False, message=message)

        self._state.update(error=None, **(changes or {}))
        self._cooldown.start(email)
        logger.info("%s: code dispatched", op)
        if info:
            self._notifications.info(op, success)
        else:
            self._notifications.success(op, success)
        return AuthOutcome(ok=True, message=success)

    def _otp_request(self, email: str) -> OtpRequest:
        email = _clean_email(email)
        if not email:
            raise MissingEmailError()
        try:
            return OtpRequest(email=email)
        except PydanticValidationError as e:
            raise InvalidCredentialsError.from_pydantic(e)

    def _parse_credentials(self, data: dict) -> Union[PasswordCredentials, OtpCredentials]:
        try:
            return _credentials.validate_python(data)
        except PydanticValidationError as e:
            raise InvalidCredentialsError.from_pydantic(e)

    def _remember(
        self,
        *,
        email: Optional[str] = None,
        password: Optional[str] = None,
        code: Optional[str] = None,
        method: Optional[LoginMethod] = None,
    ) -> None:
        self.edit_draft(email=email, password=password, code=code)
        if method is not None and self._state.get().draft.method is not method:
            state = self._state.get()
            self._state.update(draft=state.draft.model_copy(update={"method": method}))

    def _authenticated(self, op: str, message: str) -> AuthOutcome:
        self._cooldown.cancel()
        self._session.set_authenticated(True)
        state = self._state.get()
        self._state.update(
            status=AuthStatus.AUTHENTICATED,
            draft=state.draft.model_copy(update={"password": "", "code": ""}),
            error=None,
        )
        logger.info("%s: session authenticated", op)
        self._notifications.success(op, message)
        return AuthOutcome(ok=True, message=message, navigate_to=self._settings.dashboard_path)

    def _fail_login(self, op: str, error: Exception, fallback: str) -> AuthOutcome:
        message = self._log_failure(op, error, fallback)
        self._session.set_authenticated(False)
        self._api.clear_access_token()
        self._state.update(status=AuthStatus.FAILED, error=message)
        self._notifications.error(op, message)
        return AuthOutcome(ok=False, message=message)

    def _reject_input(self, op: str, error: NotesClientError) -> AuthOutcome:
        logger.debug("%s rejected locally: %s", op, error.code)
        self._state.update(error=error.message)
        self._notifications.error(op, error.message)
        return AuthOutcome(ok=False, message=error.message, throttled=isinstance(error, OtpCooldownActiveError))

    def _throttled(self, op: str) -> AuthOutcome:
        logger.debug("%s skipped: cooldown has %ss left", op, self._cooldown.remaining)
        return AuthOutcome(ok=False, throttled=True)

    @staticmethod
    def _log_failure(op: str, error: Exception, fallback: str) -> str:
        if isinstance(error, NotesClientError):
            logger.warning("%s failed: %s", op, error.code)
        else:
            logger.exception("%s raised unexpectedly", op)
        if isinstance(error, UnexpectedLoginStatusError):
            return error.message
        return user_message(error, fallback)

    def _on_cooldown_change(self, remaining: int) -> None:
        self._state.update(cooldown_remaining=remaining)
