"""Business rules for accepting a new user.

The validator decides whether a registration request may be stored.
It reads from the repository but never writes to it.
"""

import logging
import re

from .errors import ConstraintViolationError, LoginExistsError
from .models import ConstraintViolation, NewUser
from .ports import UserRepositoryPort

logger = logging.getLogger(__name__)

DEFAULT_MIN_PASSWORD_LENGTH = 6
DEFAULT_MAX_PASSWORD_LENGTH = 8
DEFAULT_PASSWORD_PATTERN = r"^[A-Za-z0-9]+$"


class UserValidator:
    """Checks a NewUser against the registration rules.

    Rules run in a fixed order: login uniqueness first, then every
    password constraint at once.
    """

    def __init__(
        self,
        repository: UserRepositoryPort,
        min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH,
        max_password_length: int = DEFAULT_MAX_PASSWORD_LENGTH,
        password_pattern: str = DEFAULT_PASSWORD_PATTERN,
    ):
        if min_password_length > max_password_length:
            raise ValueError(
                f"min_password_length ({min_password_length}) must not exceed "
                f"max_password_length ({max_password_length})"
            )
        self.repository = repository
        self.min_password_length = min_password_length
        self.max_password_length = max_password_length
        self.password_pattern = re.compile(password_pattern)

    def validate_new_user(self, candidate: NewUser) -> None:
        """Accept the candidate or raise the first failing rule's error.

        Raises:
            LoginExistsError: If the login is already registered. Password
                rules are not checked in that case.
            ConstraintViolationError: If the password breaks any constraint.
        """
        if self.repository.is_login_exists(candidate.login):
            logger.info(
                f"Rejected registration: login {candidate.login} already taken",
                extra={"login": candidate.login},
            )
            raise LoginExistsError(candidate.login)

        violations = self.check_password(candidate.password)
        if violations:
            logger.info(
                f"Rejected registration for {candidate.login}: "
                f"{len(violations)} constraint violation(s)",
                extra={"login": candidate.login, "violations": len(violations)},
            )
            raise ConstraintViolationError(violations)

    def check_password(self, password: str) -> list[ConstraintViolation]:
        """Return every password constraint the value breaks.

        An empty list means the password is acceptable. An empty password
        fails the length rule as too short.
        """
        violations: list[ConstraintViolation] = []

        if not (
            self.min_password_length <= len(password) <= self.max_password_length
        ):
            violations.append(
                ConstraintViolation(
                    field="password",
                    message=(
                        f"size must be between {self.min_password_length} "
                        f"and {self.max_password_length}"
                    ),
                )
            )

        if self.password_pattern.fullmatch(password) is None:
            violations.append(
                ConstraintViolation(
                    field="password",
                    message=f'must match "{self.password_pattern.pattern}"',
                )
            )

        return violations
