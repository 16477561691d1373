"""Error taxonomy for user registration.

Every error derives from ValueError so adapters can keep treating
ValueError as a rejected request. None of them is recovered inside
the core; they propagate to the caller unchanged.
"""

from collections.abc import Iterable

from .models import ConstraintViolation

CONSTRAINT_VIOLATION_MESSAGE = "You have errors in you object"


class UserRegistrationError(ValueError):
    """Base class for registration and lookup failures."""


class LoginExistsError(UserRegistrationError):
    """Raised when a login is already taken by a registered user."""

    def __init__(self, login: str):
        super().__init__(f"Login {login} already taken")
        self.login = login


class ConstraintViolationError(UserRegistrationError):
    """Raised when a candidate breaks one or more field constraints.

    The message is fixed no matter which or how many rules failed;
    the individual failures are available on ``violations``.
    """

    def __init__(self, violations: Iterable[ConstraintViolation] = ()):
        super().__init__(CONSTRAINT_VIOLATION_MESSAGE)
        self.violations: tuple[ConstraintViolation, ...] = tuple(violations)


class UserNotFoundError(UserRegistrationError):
    """Raised when no user is stored for a login."""

    def __init__(self, login: str):
        super().__init__(f"User with login {login} not found")
        self.login = login


__all__ = [
    "CONSTRAINT_VIOLATION_MESSAGE",
    "ConstraintViolationError",
    "LoginExistsError",
    "UserNotFoundError",
    "UserRegistrationError",
]
