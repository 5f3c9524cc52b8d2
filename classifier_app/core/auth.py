"""Login and registration workflow."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from ..constants import Messages, SUBMIT_KEY
from .exceptions import ApiError, AuthorizationError, ValidationError
from .keyboard import KeyboardListener, Subscription
from .models import AuthMode, AuthOutcome, AuthState, Credentials
from .validation import validate_identifier, validate_secret

logger = logging.getLogger(__name__)


class AuthSession:
    """
    Owns credential input, validation and the calls that establish a session.

    Every outcome ends up as at most one message in ``state.error``; no
    exception escapes ``submit``.
    """

    def __init__(self, client, state: Optional[AuthState] = None):
        self.client = client
        self.state = state or AuthState()

    def submit(
        self,
        mode: Union[AuthMode, str],
        identifier: str,
        secret: str,
        confirm_secret: str = "",
    ) -> AuthOutcome:
        """
        Validate credentials and register or log in.

        Args:
            mode: ``login`` or ``register``
            identifier: Account name
            secret: Password
            confirm_secret: Password confirmation (register only)

        Returns:
            AuthOutcome describing where the workflow stopped
        """
        mode = AuthMode(mode)
        credentials = Credentials(identifier=identifier or "", secret=secret or "")

        try:
            self._validate(mode, credentials, confirm_secret or "")
        except ValidationError as e:
            logger.info(f"Rejected {mode.value} form: {e}")
            self.state.set_error(str(e))
            return AuthOutcome.INVALID

        if mode == AuthMode.REGISTER:
            return self._register(credentials)
        return self._login(credentials)

    def submit_form(self) -> AuthOutcome:
        """Submit whatever the form currently holds."""
        state = self.state
        return self.submit(state.mode, state.identifier, state.secret, state.confirm_secret)

    def set_mode(self, mode: Union[AuthMode, str, None]) -> None:
        """Switch between login and register. Unknown modes are ignored."""
        if mode is None:
            return
        try:
            mode = AuthMode(mode)
        except ValueError:
            logger.warning(f"Ignoring unknown auth mode: {mode!r}")
            return
        self.state.switch_mode(mode)

    def update_field(self, name: str, value: str) -> None:
        """Set a form field; editing clears the current error."""
        self.state.set_field(name, value)

    @contextmanager
    def bind_enter(self, listener: KeyboardListener) -> Iterator[Subscription]:
        """Submit the form on Enter while the block is active."""
        with listener.listen(SUBMIT_KEY, self.submit_form) as subscription:
            yield subscription

    @staticmethod
    def _validate(mode: AuthMode, credentials: Credentials, confirm_secret: str) -> None:
        if not credentials.identifier or not validate_identifier(credentials.identifier):
            raise ValidationError(Messages.INVALID_IDENTIFIER)

        if mode == AuthMode.REGISTER:
            if not credentials.secret or not validate_secret(credentials.secret):
                raise ValidationError(Messages.INVALID_SECRET)
            if credentials.secret != confirm_secret:
                raise ValidationError(Messages.SECRET_MISMATCH)
        elif not credentials.secret:
            raise ValidationError(Messages.MISSING_SECRET)

    def _register(self, credentials: Credentials) -> AuthOutcome:
        try:
            self.client.register(credentials)
        except ApiError as e:
            logger.warning(f"Registration failed for '{credentials.identifier}': {e}")
            self.state.set_error(e.detail or Messages.REGISTRATION_FAILED)
            return AuthOutcome.REGISTRATION_FAILED

        logger.info(f"Registered '{credentials.identifier}', logging in")
        return self._login(credentials, after_registration=True)

    def _login(self, credentials: Credentials, after_registration: bool = False) -> AuthOutcome:
        try:
            self.client.login(credentials)
        except AuthorizationError as e:
            logger.warning(f"Login rejected for '{credentials.identifier}': {e}")
            return self._login_failed(Messages.WRONG_SECRET, after_registration)
        except ApiError as e:
            logger.warning(f"Login failed for '{credentials.identifier}': {e}")
            return self._login_failed(e.detail or Messages.LOGIN_FAILED, after_registration)

        self.state.authenticate()
        self.state.clear_error()
        self.state.clear_secrets()
        logger.info(f"Logged in as '{credentials.identifier}'")

        self._load_display_name()
        return AuthOutcome.AUTHENTICATED

    def _login_failed(self, message: str, after_registration: bool) -> AuthOutcome:
        if after_registration:
            self.state.set_error(Messages.AUTO_LOGIN_FAILED + message)
            return AuthOutcome.REGISTERED_LOGIN_FAILED
        self.state.set_error(message)
        return AuthOutcome.LOGIN_FAILED

    def _load_display_name(self) -> None:
        try:
            self.state.set_display_name(self.client.get_username())
        except ApiError as e:
            logger.warning(f"Could not fetch username: {e}")
            self.state.set_error(Messages.USERNAME_UNAVAILABLE)
