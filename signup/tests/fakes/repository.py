"""Fake UserRepositoryPort implementation for testing."""

from signup.core.errors import UserNotFoundError
from signup.core.models import User
from signup.core.ports import UserRepositoryPort


class FakeUserRepositoryPort(UserRepositoryPort):
    """In-memory user repository for testing.

    Tracks every call for test assertions. ``login_exists_override`` maps
    a login to a forced ``is_login_exists`` answer, so validator tests can
    simulate a taken login without storing a user.
    """

    def __init__(self):
        """Initialize with empty user store."""
        self.users: dict[str, User] = {}
        self.login_exists_override: dict[str, bool] = {}
        self.saved_users: list[User] = []
        self.is_login_exists_calls: list[str] = []
        self.get_user_by_login_calls: list[str] = []

    def is_login_exists(self, login: str) -> bool:
        self.is_login_exists_calls.append(login)
        if login in self.login_exists_override:
            return self.login_exists_override[login]
        return login in self.users

    def get_user_by_login(self, login: str) -> User:
        self.get_user_by_login_calls.append(login)
        if login not in self.users:
            raise UserNotFoundError(login)
        return self.users[login]

    def save(self, user: User) -> None:
        """Save a user, overwriting any previous one with the same login."""
        self.users[user.login] = user
        self.saved_users.append(user)

    def get_all(self) -> list[User]:
        return list(self.users.values())

    def add_user(self, user: User) -> None:
        """Seed a user without recording it as saved."""
        self.users[user.login] = user

    def reset(self) -> None:
        """Reset all collected data."""
        self.users.clear()
        self.login_exists_override.clear()
        self.saved_users.clear()
        self.is_login_exists_calls.clear()
        self.get_user_by_login_calls.clear()
