"""In-memory user repository adapter.

Implements UserRepositoryPort over a dict keyed by login. Users live for
the lifetime of the process; nothing is written to disk.
"""

import logging

from signup.core.errors import LoginExistsError, UserNotFoundError
from signup.core.models import User
from signup.core.ports import UserRepositoryPort

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepositoryPort):
    """Dict-backed user store.

    Refuses to overwrite an existing login even though the validator
    already checks uniqueness before every save.
    """

    def __init__(self) -> None:
        # dicts preserve insertion order, which get_all relies on
        self._users: dict[str, User] = {}

    def is_login_exists(self, login: str) -> bool:
        return login in self._users

    def get_user_by_login(self, login: str) -> User:
        """Look up a user by login, raising UserNotFoundError if absent."""
        try:
            return self._users[login]
        except KeyError:
            raise UserNotFoundError(login) from None

    def save(self, user: User) -> None:
        """Store a new user.

        Raises:
            LoginExistsError: If a user with the same login is already stored.
        """
        if user.login in self._users:
            logger.warning(
                f"Refusing to overwrite existing user {user.login}",
                extra={"login": user.login},
            )
            raise LoginExistsError(user.login)

        self._users[user.login] = user
        logger.debug(f"Saved user {user.login}", extra={"login": user.login})

    def get_all(self) -> list[User]:
        return list(self._users.values())

    def __len__(self) -> int:
        return len(self._users)
