"""Core domain logic for the signup registration service.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .errors import (
    ConstraintViolationError,
    LoginExistsError,
    UserNotFoundError,
    UserRegistrationError,
)
from .models import ConstraintViolation, NewUser, User

__all__ = [
    "ConstraintViolation",
    "ConstraintViolationError",
    "LoginExistsError",
    "NewUser",
    "User",
    "UserNotFoundError",
    "UserRegistrationError",
]
