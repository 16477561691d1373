"""Port interfaces for the signup registration service.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - UserRepositoryPort: Persist and query registered users

2. **Driving Ports** (adapters call into core)
   - RegistrationPort: Register users and look them up
"""

from abc import ABC, abstractmethod

from .models import NewUser, User


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class UserRepositoryPort(ABC):
    """Port for persisting and querying registered users.

    Users are keyed by login. Adapters must keep at most one user per
    login; the validator checks uniqueness before any save, but an
    adapter may also refuse a duplicate on its own.
    """

    @abstractmethod
    def is_login_exists(self, login: str) -> bool:
        """Check whether a user with this login is stored.

        Args:
            login: Login to look up.

        Returns:
            True if a user with the login exists, False otherwise.
        """

    @abstractmethod
    def get_user_by_login(self, login: str) -> User:
        """Retrieve a user by login.

        Args:
            login: Login of the user.

        Returns:
            The stored User.

        Raises:
            UserNotFoundError: If no user is stored for the login.
        """

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new user keyed by its login.

        Args:
            user: Validated user to store.

        Raises:
            LoginExistsError: If the adapter rejects duplicate logins
                and the login is already stored.
        """

    @abstractmethod
    def get_all(self) -> list[User]:
        """Retrieve every stored user.

        Returns:
            Users in the order they were saved. Empty list if none.
        """


# ============================================================================
# DRIVING PORTS (Adapters call into core)
# ============================================================================


class RegistrationPort(ABC):
    """Port for registering users and reading them back.

    Called by the CLI (or any other front end) to drive the core.
    """

    @abstractmethod
    def create_new_user(self, new_user: NewUser) -> User:
        """Validate a registration request and persist the user.

        Args:
            new_user: Unvalidated registration request.

        Returns:
            The stored User.

        Raises:
            LoginExistsError: If the login is already taken.
            ConstraintViolationError: If the password breaks a constraint.
        """

    @abstractmethod
    def get_user_by_login(self, login: str) -> User:
        """Look up a registered user.

        Raises:
            UserNotFoundError: If the login is not registered.
        """

    @abstractmethod
    def list_users(self) -> list[User]:
        """List every registered user in registration order."""
