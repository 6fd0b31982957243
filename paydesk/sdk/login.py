"""Login validation and attempt limiting.

SDK layer - pure classification plus an explicit apply step. No I/O.

Validation rules are checked in order, first match wins:
1. Username or password empty -> EMPTY_INPUT
2. Username has a non-letter character -> INVALID_FORMAT
3. Password has a non-digit character -> INVALID_FORMAT
4. Username differs from the valid one -> WRONG_USERNAME
5. Password differs from the valid one -> WRONG_PASSWORD
6. Otherwise -> SUCCESS

Usage:
    from paydesk.sdk.login import LoginBuffers, LoginSession

    session = LoginSession(credentials)
    buffers = LoginBuffers(username="hgzy", password="9999")
    outcome = session.attempt(buffers)   # WRONG_PASSWORD, password cleared
"""

import logging
import string
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import DEFAULT_CREDENTIALS
from .schemas import Credentials

logger = logging.getLogger(__name__)

MAX_ATTEMPTS = 3

_LETTERS = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)


class LoginOutcome(str, Enum):
    """Classification of a single login attempt."""

    SUCCESS = "success"
    EMPTY_INPUT = "empty_input"
    INVALID_FORMAT = "invalid_format"
    WRONG_USERNAME = "wrong_username"
    WRONG_PASSWORD = "wrong_password"


class LoginState(str, Enum):
    """Where a login session stands."""

    IN_PROGRESS = "in_progress"
    AUTHENTICATED = "authenticated"
    LOCKED_OUT = "locked_out"


class LoginSessionClosedError(Exception):
    """Raised when an attempt is recorded on a session that already ended."""
    pass


_OUTCOME_MESSAGES = {
    LoginOutcome.SUCCESS: "Login successful",
    LoginOutcome.EMPTY_INPUT: "Username and password must not be empty",
    LoginOutcome.INVALID_FORMAT: (
        "Invalid input: username must be letters only, password must be digits only"
    ),
    LoginOutcome.WRONG_USERNAME: "Incorrect username or password",
    LoginOutcome.WRONG_PASSWORD: "Incorrect username or password",
}

_CLEARED_NOTES = {
    LoginOutcome.WRONG_USERNAME: "Username and password have been cleared",
    LoginOutcome.WRONG_PASSWORD: "Username kept, password has been cleared",
}


@dataclass
class LoginBuffers:
    """In-flight username/password text for one login sequence."""

    username: str = ""
    password: str = ""


def _is_empty(value: Optional[str]) -> bool:
    return value is None or value == ""


def validate_login(
    username: Optional[str],
    password: Optional[str],
    credentials: Credentials = DEFAULT_CREDENTIALS,
) -> LoginOutcome:
    """Classify a username/password pair.

    Pure function: never touches the caller's buffers. Letters and digits
    are ASCII only.

    Args:
        username: Typed username (None treated as empty)
        password: Typed password (None treated as empty)
        credentials: The valid pair to compare against

    Returns:
        LoginOutcome for this attempt
    """
    if _is_empty(username) or _is_empty(password):
        return LoginOutcome.EMPTY_INPUT

    if not set(username) <= _LETTERS:
        return LoginOutcome.INVALID_FORMAT

    if not set(password) <= _DIGITS:
        return LoginOutcome.INVALID_FORMAT

    if username != credentials.username:
        return LoginOutcome.WRONG_USERNAME

    if password != credentials.password:
        return LoginOutcome.WRONG_PASSWORD

    return LoginOutcome.SUCCESS


def apply_outcome(outcome: LoginOutcome, buffers: LoginBuffers) -> bool:
    """Clear buffers as the outcome requires.

    WRONG_USERNAME clears both buffers, WRONG_PASSWORD clears only the
    password. Every other outcome leaves the buffers alone.

    Returns:
        True if another attempt should be offered, False on success
    """
    if outcome == LoginOutcome.WRONG_USERNAME:
        buffers.username = ""
        buffers.password = ""
    elif outcome == LoginOutcome.WRONG_PASSWORD:
        buffers.password = ""

    return outcome != LoginOutcome.SUCCESS


def outcome_message(outcome: LoginOutcome) -> str:
    """User-facing message for an outcome."""
    return _OUTCOME_MESSAGES[outcome]


def cleared_note(outcome: LoginOutcome) -> Optional[str]:
    """Describe which buffers were cleared, or None if nothing was."""
    return _CLEARED_NOTES.get(outcome)


class LoginSession:
    """Attempt bookkeeping for one login sequence.

    Every non-success outcome uses up one attempt. Reaching MAX_ATTEMPTS
    without success locks the session out; success authenticates it.
    Both are terminal.
    """

    def __init__(self, credentials: Credentials = DEFAULT_CREDENTIALS,
                 max_attempts: int = MAX_ATTEMPTS):
        self.credentials = credentials
        self.max_attempts = max_attempts
        self.attempts = 0
        self.state = LoginState.IN_PROGRESS

    @property
    def attempts_remaining(self) -> int:
        return max(0, self.max_attempts - self.attempts)

    @property
    def is_concluded(self) -> bool:
        return self.state != LoginState.IN_PROGRESS

    def record(self, outcome: LoginOutcome) -> LoginState:
        """Record an outcome and advance the session state.

        Raises:
            LoginSessionClosedError: If the session already ended
        """
        if self.is_concluded:
            raise LoginSessionClosedError(
                f"Login session already {self.state.value}"
            )

        if outcome == LoginOutcome.SUCCESS:
            self.state = LoginState.AUTHENTICATED
            logger.debug(f"login succeeded after {self.attempts} failed attempt(s)")
            return self.state

        self.attempts += 1
        logger.debug(
            f"login attempt {self.attempts}/{self.max_attempts} failed: {outcome.value}"
        )

        if self.attempts >= self.max_attempts:
            self.state = LoginState.LOCKED_OUT
            logger.warning(f"login locked out after {self.attempts} failed attempts")

        return self.state

    def attempt(self, buffers: LoginBuffers) -> LoginOutcome:
        """Validate the buffers, clear them per outcome, and record the attempt."""
        outcome = validate_login(buffers.username, buffers.password, self.credentials)
        apply_outcome(outcome, buffers)
        self.record(outcome)
        return outcome

    def lock_out(self) -> None:
        """End the session as a failure without consuming an attempt."""
        if not self.is_concluded:
            self.state = LoginState.LOCKED_OUT
            logger.warning("login ended before authentication")
