from __future__ import annotations

import pytest
from pydantic import ValidationError

from neurofleet.auth import Authenticator, UserRoster
from neurofleet.config import FleetConfig
from neurofleet.exceptions import AccountLockedError, DuplicateAccountError, InvalidCredentialsError
from neurofleet.models.users import Permission, Role, SignupRequest


class _ManualClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def _auth(clock: _ManualClock | None = None, **config: object) -> Authenticator:
    return Authenticator(UserRoster(), FleetConfig(**config), clock=clock or _ManualClock())  # type: ignore[arg-type]


def test_login_success_returns_session() -> None:
    auth = _auth()
    session = auth.login("manager@neurofleetx.com", "manager123")

    assert session.user.name == "Fleet Manager"
    assert session.role == Role.MANAGER
    assert session.has_permission(Permission.MANAGE_FLEET)
    assert not session.has_permission(Permission.EDIT_LIMITED)
    assert auth.failed_attempts == 0


def test_failures_count_down_then_lock() -> None:
    auth = _auth()

    with pytest.raises(InvalidCredentialsError) as first:
        auth.login("admin@neurofleetx.com", "wrong")
    assert first.value.attempts_remaining == 2

    with pytest.raises(InvalidCredentialsError) as second:
        auth.login("nobody@example.com", "admin123")
    assert second.value.attempts_remaining == 1

    with pytest.raises(AccountLockedError) as third:
        auth.login("admin@neurofleetx.com", "wrong")
    assert third.value.retry_after == 30
    assert auth.is_locked


def test_locked_rejects_correct_credentials_until_expiry() -> None:
    clock = _ManualClock()
    auth = _auth(clock)
    for _ in range(2):
        with pytest.raises(InvalidCredentialsError):
            auth.login("viewer@neurofleetx.com", "nope")
    with pytest.raises(AccountLockedError):
        auth.login("viewer@neurofleetx.com", "nope")

    clock.now += 29.5
    with pytest.raises(AccountLockedError) as locked:
        auth.login("viewer@neurofleetx.com", "viewer123")
    assert locked.value.retry_after == pytest.approx(0.5)

    clock.now += 0.5
    session = auth.login("viewer@neurofleetx.com", "viewer123")
    assert session.user.email == "viewer@neurofleetx.com"
    assert auth.failed_attempts == 0
    assert not auth.is_locked


def test_expired_lock_resets_counter_before_new_failure() -> None:
    clock = _ManualClock()
    auth = _auth(clock)
    for _ in range(2):
        with pytest.raises(InvalidCredentialsError):
            auth.login("viewer@neurofleetx.com", "nope")
    with pytest.raises(AccountLockedError):
        auth.login("viewer@neurofleetx.com", "nope")

    clock.now += 30
    with pytest.raises(InvalidCredentialsError) as again:
        auth.login("viewer@neurofleetx.com", "nope")
    assert again.value.attempts_remaining == 2


def test_success_resets_counter() -> None:
    auth = _auth()
    with pytest.raises(InvalidCredentialsError):
        auth.login("operator@neurofleetx.com", "bad")
    assert auth.failed_attempts == 1

    auth.login("operator@neurofleetx.com", "operator123")
    assert auth.failed_attempts == 0


def test_lockout_settings_from_config() -> None:
    clock = _ManualClock()
    auth = _auth(clock, max_login_attempts=1, lockout_seconds=5)
    with pytest.raises(AccountLockedError):
        auth.login("admin@neurofleetx.com", "bad")
    clock.now += 5
    auth.login("admin@neurofleetx.com", "admin123")


def test_signup_adds_viewer() -> None:
    auth = _auth()
    session = auth.signup(SignupRequest(name="New Person", email="new@example.com", password="secret1"))

    assert session.user.id == 5
    assert session.role == Role.VIEWER
    assert len(auth.roster) == 5
    assert auth.login("new@example.com", "secret1").user.name == "New Person"


def test_signup_duplicate_email_rejected() -> None:
    auth = _auth()
    with pytest.raises(DuplicateAccountError) as excinfo:
        auth.signup(SignupRequest(name="Again", email="admin@neurofleetx.com", password="another1"))

    assert excinfo.value.email == "admin@neurofleetx.com"
    assert len(auth.roster) == 4


def test_signup_request_validation() -> None:
    with pytest.raises(ValidationError):
        SignupRequest(name="x", email="x@example.com", password="short")
    with pytest.raises(ValidationError):
        SignupRequest(name="x", email="not-an-email", password="longenough")


def test_password_not_in_repr() -> None:
    user = UserRoster().find_by_email("admin@neurofleetx.com")
    assert user is not None
    assert "admin123" not in repr(user)
