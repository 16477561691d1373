"""Unit tests for UserValidator.

The repository is replaced with FakeUserRepositoryPort so login
uniqueness can be forced either way without storing users.
"""

import pytest

from signup.core.errors import ConstraintViolationError, LoginExistsError
from signup.core.models import NewUser
from signup.core.validator import UserValidator
from signup.tests.fakes import FakeUserRepositoryPort

FULL_NAME = "Anton Kononko"
LOGIN = "anton888"
VALID_PASSWORD = "abcde1"


# ============================================================================
# Test Fixtures
# ============================================================================


@pytest.fixture
def repository() -> FakeUserRepositoryPort:
    """Create a repository that reports the test login as free."""
    repo = FakeUserRepositoryPort()
    repo.login_exists_override[LOGIN] = False
    return repo


@pytest.fixture
def validator(repository: FakeUserRepositoryPort) -> UserValidator:
    return UserValidator(repository)


def make_user(password: str = VALID_PASSWORD) -> NewUser:
    return NewUser(full_name=FULL_NAME, login=LOGIN, password=password)


# ============================================================================
# validate_new_user
# ============================================================================


class TestValidateNewUser:
    """Test the ordered registration rules."""

    def test_valid_user_passes(self, validator: UserValidator) -> None:
        assert validator.validate_new_user(make_user()) is None

    def test_valid_user_consults_repository(
        self, validator: UserValidator, repository: FakeUserRepositoryPort
    ) -> None:
        validator.validate_new_user(make_user())

        assert repository.is_login_exists_calls == [LOGIN]

    def test_existing_login_rejected(
        self, validator: UserValidator, repository: FakeUserRepositoryPort
    ) -> None:
        repository.login_exists_override[LOGIN] = True

        with pytest.raises(LoginExistsError) as exc_info:
            validator.validate_new_user(make_user())

        assert str(exc_info.value) == f"Login {LOGIN} already taken"

    def test_existing_login_checked_before_password(
        self, validator: UserValidator, repository: FakeUserRepositoryPort
    ) -> None:
        """A taken login wins even when the password is also invalid."""
        repository.login_exists_override[LOGIN] = True

        with pytest.raises(LoginExistsError):
            validator.validate_new_user(make_user(password="ab"))

    @pytest.mark.parametrize(
        "password",
        [
            "",  # empty
            "ab",  # too short
            "123456789",  # too long
            "її№;$",  # outside the allowed characters
        ],
    )
    def test_invalid_passwords_rejected(
        self, validator: UserValidator, password: str
    ) -> None:
        with pytest.raises(ConstraintViolationError) as exc_info:
            validator.validate_new_user(make_user(password=password))

        assert str(exc_info.value) == "You have errors in you object"

    def test_validation_has_no_side_effects(
        self, validator: UserValidator, repository: FakeUserRepositoryPort
    ) -> None:
        validator.validate_new_user(make_user())

        assert repository.saved_users == []
        assert repository.users == {}


# ============================================================================
# check_password
# ============================================================================


class TestCheckPassword:
    """Test that every broken password constraint is reported."""

    @pytest.mark.parametrize("password", ["abcdef", "abcde1", "ABCdef12", "123456"])
    def test_acceptable_passwords(self, validator: UserValidator, password: str) -> None:
        assert validator.check_password(password) == []

    def test_length_bounds_are_inclusive(self, validator: UserValidator) -> None:
        assert validator.check_password("a" * 6) == []
        assert validator.check_password("a" * 8) == []
        assert len(validator.check_password("a" * 5)) == 1
        assert len(validator.check_password("a" * 9)) == 1

    def test_short_password_reports_size(self, validator: UserValidator) -> None:
        violations = validator.check_password("ab")

        assert len(violations) == 1
        assert violations[0].field == "password"
        assert violations[0].message == "size must be between 6 and 8"

    def test_symbols_report_pattern(self, validator: UserValidator) -> None:
        violations = validator.check_password("abc!def")

        assert len(violations) == 1
        assert "must match" in violations[0].message

    def test_all_failures_reported_together(self, validator: UserValidator) -> None:
        """Short and non-matching at once yields both violations."""
        violations = validator.check_password("її№;$")

        assert len(violations) == 2

    def test_empty_password_fails_length_and_pattern(self, validator: UserValidator) -> None:
        violations = validator.check_password("")

        messages = [v.message for v in violations]
        assert len(violations) == 2
        assert "size must be between 6 and 8" in messages
        assert 'must match "^[A-Za-z0-9]+$"' in messages

    def test_trailing_newline_rejected(self, validator: UserValidator) -> None:
        assert validator.check_password("abcde1\n") != []

    def test_violations_attached_to_error(
        self, validator: UserValidator
    ) -> None:
        with pytest.raises(ConstraintViolationError) as exc_info:
            validator.validate_new_user(make_user(password="123456789"))

        assert len(exc_info.value.violations) == 1
        assert exc_info.value.violations[0].field == "password"


class TestCustomPolicy:
    """Test non-default password policies."""

    def test_custom_bounds_and_pattern(self, repository: FakeUserRepositoryPort) -> None:
        validator = UserValidator(
            repository,
            min_password_length=2,
            max_password_length=4,
            password_pattern=r"^[a-z]+$",
        )

        assert validator.check_password("ab") == []
        assert len(validator.check_password("abcde")) == 1
        assert len(validator.check_password("AB")) == 1

    def test_min_above_max_rejected(self, repository: FakeUserRepositoryPort) -> None:
        with pytest.raises(ValueError):
            UserValidator(repository, min_password_length=9, max_password_length=8)
