"""In-memory account roster and login handling.

Credentials are compared in plain text against the session roster. Three
consecutive failures lock the authenticator for a fixed period.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable, Iterable, Iterator

from neurofleet import _seed
from neurofleet.config import FleetConfig
from neurofleet.exceptions import AccountLockedError, DuplicateAccountError, InvalidCredentialsError
from neurofleet.models.users import Role, SignupRequest, User
from neurofleet.session import Session

_logger = logging.getLogger(__name__)


class UserRoster:
    """Accounts known to this session. Signups are appended and lost on reset."""

    def __init__(self, users: Iterable[User] | None = None) -> None:
        self._users: list[User] = list(users) if users is not None else _seed.initial_users()

    def __len__(self) -> int:
        return len(self._users)

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def find_by_email(self, email: str) -> User | None:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def add(self, user: User) -> None:
        if self.find_by_email(user.email) is not None:
            raise DuplicateAccountError(
                "Email already registered. Please use a different email.",
                email=user.email,
            )
        self._users.append(user)


class Authenticator:
    """Login and signup against a :class:`UserRoster`.

    The failure counter is shared by all emails: it counts consecutive
    failed attempts on this authenticator, not per account.

    Parameters
    ----------
    roster : UserRoster
        Accounts to authenticate against.
    config : FleetConfig
        Supplies ``max_login_attempts`` and ``lockout_seconds``.
    clock : callable
        Monotonic seconds, used for the lockout window.
    """

    def __init__(
        self,
        roster: UserRoster,
        config: FleetConfig,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._roster = roster
        self._config = config
        self._clock = clock
        self._failed_attempts = 0
        self._locked_until: float | None = None

    @property
    def roster(self) -> UserRoster:
        return self._roster

    @property
    def failed_attempts(self) -> int:
        return self._failed_attempts

    @property
    def is_locked(self) -> bool:
        return self._locked_until is not None and self._clock() < self._locked_until

    def _release_expired_lock(self, now: float) -> None:
        if self._locked_until is not None and now >= self._locked_until:
            self._locked_until = None
            self._failed_attempts = 0
            _logger.debug("Login lockout expired")

    def login(self, email: str, password: str) -> Session:
        """Authenticate and return a new session.

        Raises
        ------
        AccountLockedError
            While locked, or when this failure reaches the attempt limit.
        InvalidCredentialsError
            When the email/password pair does not match and attempts remain.
        """
        now = self._clock()
        self._release_expired_lock(now)
        if self._locked_until is not None:
            raise AccountLockedError(
                "Account temporarily locked. Please try again later.",
                retry_after=self._locked_until - now,
            )

        user = self._roster.find_by_email(email)
        if user is None or user.password != password:
            self._failed_attempts += 1
            limit = self._config.max_login_attempts
            if self._failed_attempts >= limit:
                self._locked_until = now + self._config.lockout_seconds
                _logger.warning(
                    "Login locked for %.0fs after %d failed attempts",
                    self._config.lockout_seconds,
                    self._failed_attempts,
                )
                raise AccountLockedError(
                    f"Too many failed attempts. Account locked for {self._config.lockout_seconds:g} seconds.",
                    retry_after=self._config.lockout_seconds,
                )
            remaining = limit - self._failed_attempts
            _logger.info("Failed login attempt %d/%d", self._failed_attempts, limit)
            raise InvalidCredentialsError(
                f"Invalid email or password. {remaining} attempts remaining.",
                attempts_remaining=remaining,
            )

        self._failed_attempts = 0
        _logger.info("User id=%d logged in role=%s", user.id, user.role)
        return Session(user=user)

    def signup(self, request: SignupRequest) -> Session:
        """Register a viewer account and return its session.

        Raises
        ------
        DuplicateAccountError
            If the email is already in the roster. The roster is unchanged.
        """
        user = User(
            id=len(self._roster) + 1,
            name=request.name,
            email=request.email,
            password=request.password,
            role=Role.VIEWER,
        )
        self._roster.add(user)
        _logger.info("Registered user id=%d", user.id)
        return Session(user=user)
