"""Domain models for the signup registration service.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class NewUser:
    """An unvalidated registration request.

    Transient input: never persisted directly. A User is built from it
    only after the validator accepts it.
    """

    full_name: str
    login: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class User:
    """A registered user.

    The login is the unique identifier. Instances are immutable and
    compare by value, so a user read back from the repository equals
    the one that was saved.
    """

    full_name: str
    login: str
    password: str = field(repr=False)

    @classmethod
    def from_new_user(cls, new_user: NewUser) -> "User":
        """Build the persisted record from a validated registration request."""
        return cls(
            full_name=new_user.full_name,
            login=new_user.login,
            password=new_user.password,
        )


@dataclass(frozen=True)
class ConstraintViolation:
    """A single failed field-level rule."""

    field: str  # e.g. "password"
    message: str
