"""Tests for the login/register workflow."""

import pytest

from classifier_app.constants import Messages
from classifier_app.core.auth import AuthSession
from classifier_app.core.exceptions import AuthorizationError, ServerError
from classifier_app.core.models import AuthMode, AuthOutcome, Credentials

from conftest import make_response


VALID_SECRET = "passw0rd!"


class TestRegister:
    """Register mode validation and the automatic login that follows."""

    def test_mismatched_confirmation_makes_no_call(self, auth, client):
        outcome = auth.submit("register", "alice", VALID_SECRET, "passw0rd?")

        assert outcome == AuthOutcome.INVALID
        assert "do not match" in auth.state.error
        client.register.assert_not_called()
        client.login.assert_not_called()

    def test_weak_secret_rejected_locally(self, auth, client):
        outcome = auth.submit("register", "alice", "password", "password")

        assert outcome == AuthOutcome.INVALID
        assert auth.state.error == Messages.INVALID_SECRET
        client.register.assert_not_called()

    def test_invalid_identifier_checked_first(self, auth, client):
        auth.submit("register", "a!", "weak", "other")

        assert auth.state.error == Messages.INVALID_IDENTIFIER

    def test_success_chains_into_login(self, auth, client):
        client.get_username.return_value = "alice"

        outcome = auth.submit("register", "alice", VALID_SECRET, VALID_SECRET)

        assert outcome == AuthOutcome.AUTHENTICATED
        expected = Credentials("alice", VALID_SECRET)
        client.register.assert_called_once_with(expected)
        client.login.assert_called_once_with(expected)
        assert auth.state.session.is_authenticated
        assert auth.state.session.display_name == "alice"

    def test_server_message_surfaced(self, auth, client):
        client.register.side_effect = ServerError(409, "User exists", detail="User exists")

        outcome = auth.submit("register", "alice", VALID_SECRET, VALID_SECRET)

        assert outcome == AuthOutcome.REGISTRATION_FAILED
        assert auth.state.error == "User exists"
        client.login.assert_not_called()

    def test_generic_message_without_server_detail(self, auth, client):
        client.register.side_effect = ServerError(0, "Connection error: refused")

        auth.submit("register", "alice", VALID_SECRET, VALID_SECRET)

        assert auth.state.error == Messages.REGISTRATION_FAILED

    def test_failed_automatic_login_is_distinguishable(self, auth, client):
        client.login.side_effect = ServerError(500, "boom")

        outcome = auth.submit("register", "alice", VALID_SECRET, VALID_SECRET)

        assert outcome == AuthOutcome.REGISTERED_LOGIN_FAILED
        assert auth.state.error.startswith(Messages.AUTO_LOGIN_FAILED)
        assert auth.state.error.endswith(Messages.LOGIN_FAILED)
        assert not auth.state.is_authenticated


class TestLogin:
    """Login mode validation and error mapping."""

    def test_short_identifier_rejected_locally(self, auth, client):
        outcome = auth.submit("login", "ab", "anything")

        assert outcome == AuthOutcome.INVALID
        assert "valid email address" in auth.state.error
        client.login.assert_not_called()

    def test_missing_secret_rejected_locally(self, auth, client):
        auth.submit("login", "alice", "")

        assert auth.state.error == Messages.MISSING_SECRET
        client.login.assert_not_called()

    def test_login_does_not_check_secret_strength(self, auth, client):
        client.get_username.return_value = "alice"

        outcome = auth.submit("login", "alice", "short")

        assert outcome == AuthOutcome.AUTHENTICATED

    def test_unauthorized_means_wrong_secret(self, auth, client):
        client.login.side_effect = AuthorizationError(401, "Invalid credentials", detail="Invalid credentials")

        outcome = auth.submit("login", "alice", VALID_SECRET)

        assert outcome == AuthOutcome.LOGIN_FAILED
        assert auth.state.error == Messages.WRONG_SECRET

    def test_other_failures_use_server_message(self, auth, client):
        client.login.side_effect = ServerError(404, "User not found", detail="User not found")

        auth.submit("login", "alice", VALID_SECRET)

        assert auth.state.error == "User not found"

    def test_other_failures_fall_back_to_generic(self, auth, client):
        client.login.side_effect = ServerError(503, "503 Server Error")

        auth.submit("login", "alice", VALID_SECRET)

        assert auth.state.error == Messages.LOGIN_FAILED

    def test_success_fetches_display_name_and_clears_secrets(self, auth, client):
        client.get_username.return_value = "Alice A."
        auth.update_field("identifier", "alice")
        auth.update_field("secret", VALID_SECRET)

        outcome = auth.submit_form()

        assert outcome == AuthOutcome.AUTHENTICATED
        assert auth.state.session.display_name == "Alice A."
        assert auth.state.secret == ""
        assert auth.state.error == ""

    def test_username_failure_keeps_session(self, auth, client):
        client.get_username.side_effect = ServerError(500, "boom")

        outcome = auth.submit("login", "alice", VALID_SECRET)

        assert outcome == AuthOutcome.AUTHENTICATED
        assert auth.state.is_authenticated
        assert auth.state.session.display_name is None
        assert auth.state.error == Messages.USERNAME_UNAVAILABLE

    def test_username_body_not_an_object_keeps_session(self, api, http_session):
        http_session.request.side_effect = [
            make_response(200, {"message": "ok"}),
            make_response(200, ["alice"]),
        ]
        auth = AuthSession(api)

        outcome = auth.submit("login", "alice", VALID_SECRET)

        assert outcome == AuthOutcome.AUTHENTICATED
        assert auth.state.is_authenticated
        assert auth.state.session.display_name is None
        assert auth.state.error == Messages.USERNAME_UNAVAILABLE


class TestModeSwitching:

    def test_switching_clears_error(self, auth):
        auth.submit("login", "ab", "x")
        assert auth.state.error

        auth.set_mode("register")

        assert auth.state.mode == AuthMode.REGISTER
        assert auth.state.error == ""

    def test_switching_to_login_discards_confirmation(self, auth):
        auth.set_mode("register")
        auth.update_field("confirm_secret", VALID_SECRET)

        auth.set_mode("login")
        auth.set_mode("register")

        assert auth.state.confirm_secret == ""

    def test_switching_to_register_keeps_other_fields(self, auth):
        auth.update_field("identifier", "alice")
        auth.update_field("secret", VALID_SECRET)

        auth.set_mode("register")

        assert auth.state.identifier == "alice"
        assert auth.state.secret == VALID_SECRET

    @pytest.mark.parametrize("mode", [None, "admin"])
    def test_unknown_mode_ignored(self, auth, mode):
        auth.set_mode(mode)

        assert auth.state.mode == AuthMode.LOGIN

    def test_editing_a_field_clears_error(self, auth):
        auth.submit("login", "ab", "x")

        auth.update_field("identifier", "abc")

        assert auth.state.error == ""


class TestEnterKey:
    """Enter submits the form with the values current at key-press time."""

    def test_enter_submits_current_values(self, auth, client, keyboard):
        client.get_username.return_value = "bob"

        with auth.bind_enter(keyboard):
            auth.update_field("identifier", "bob")
            auth.update_field("secret", VALID_SECRET)
            keyboard.dispatch("Enter")

        client.login.assert_called_once_with(Credentials("bob", VALID_SECRET))

    def test_binding_removed_on_exit(self, auth, client, keyboard):
        with auth.bind_enter(keyboard):
            assert keyboard.count("Enter") == 1

        assert keyboard.count("Enter") == 0
        assert keyboard.dispatch("Enter") == 0
        client.login.assert_not_called()

    def test_binding_removed_when_block_raises(self, auth, keyboard):
        with pytest.raises(RuntimeError):
            with auth.bind_enter(keyboard):
                raise RuntimeError("render failed")

        assert keyboard.count() == 0
