"""User service: implements RegistrationPort.

Orchestrates registration by running the validator before anything is
persisted, and exposes lookups over the user repository.
"""

import logging

from .models import NewUser, User
from .ports import RegistrationPort, UserRepositoryPort
from .validator import UserValidator

logger = logging.getLogger(__name__)


class UserService(RegistrationPort):
    """Core implementation of RegistrationPort.

    Validation failures propagate unchanged and leave the repository
    untouched.
    """

    def __init__(self, repository: UserRepositoryPort, validator: UserValidator):
        """Initialize the user service.

        Args:
            repository: UserRepositoryPort implementation for persistence.
            validator: UserValidator applying the registration rules.
        """
        self.repository = repository
        self.validator = validator

    def create_new_user(self, new_user: NewUser) -> User:
        """Register a user.

        Raises:
            LoginExistsError: If the login is already taken.
            ConstraintViolationError: If the password breaks a constraint.
        """
        self.validator.validate_new_user(new_user)

        user = User.from_new_user(new_user)
        self.repository.save(user)

        logger.info(
            f"User {user.login} registered",
            extra={"login": user.login, "full_name": user.full_name},
        )
        return user

    def get_user_by_login(self, login: str) -> User:
        return self.repository.get_user_by_login(login)

    def list_users(self) -> list[User]:
        return self.repository.get_all()
