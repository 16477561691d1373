"""CLI command implementations for user registration.

This adapter maps CLI commands (register, get, list) to RegistrationPort
operations. It handles CLI-specific formatting and error reporting.
Passwords are never included in command results.
"""

import logging
from typing import Any

from signup.core.errors import ConstraintViolationError, UserRegistrationError
from signup.core.models import NewUser, User
from signup.core.ports import RegistrationPort

logger = logging.getLogger(__name__)


def _user_to_dict(user: User) -> dict[str, Any]:
    return {"full_name": user.full_name, "login": user.login}


class CLICommandHandler:
    """Handles CLI commands by delegating to RegistrationPort."""

    def __init__(self, registration: RegistrationPort):
        """Initialize the CLI command handler.

        Args:
            registration: RegistrationPort implementation to execute commands.
        """
        self.registration = registration

    def register_user(
        self,
        full_name: str,
        login: str,
        password: str,
        verbose: bool = False,
    ) -> dict[str, Any]:
        """Register a new user via CLI.

        Args:
            full_name: Display name of the user.
            login: Requested login.
            password: Plain password to validate.
            verbose: If True, log additional information.

        Returns:
            Dictionary with status and message. Validation failures are
            reported as an error result rather than raised.
        """
        new_user = NewUser(full_name=full_name, login=login, password=password)
        try:
            user = self.registration.create_new_user(new_user)
        except UserRegistrationError as e:
            logger.error(f"Failed to register user: {e}")
            return self._error_result("register", login, e)

        if verbose:
            logger.info(
                f"Registered user {login}",
                extra={"login": login, "verbose": True},
            )

        return {
            "status": "success",
            "operation": "register",
            "login": login,
            "message": f"User {login} registered",
            "data": _user_to_dict(user),
        }

    def get_user(self, login: str, output_format: str = "json") -> dict[str, Any]:
        """Look up a user via CLI.

        Args:
            login: Login of the user.
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with user data or status/message on error.
        """
        try:
            user = self.registration.get_user_by_login(login)
        except UserRegistrationError as e:
            logger.error(f"Failed to get user: {e}")
            return self._error_result("get", login, e)

        if output_format == "json":
            data: Any = _user_to_dict(user)
        elif output_format == "text":
            data = self._format_user_as_text(user)
        else:
            return {
                "status": "error",
                "operation": "get",
                "message": f"Unsupported format: {output_format}",
            }

        return {"status": "success", "operation": "get", "data": data}

    def list_users(self, output_format: str = "json") -> dict[str, Any]:
        """List registered users via CLI.

        Args:
            output_format: Output format ('json', 'text'). Default 'json'.

        Returns:
            Dictionary with the user list and a count.
        """
        users = self.registration.list_users()

        if output_format == "json":
            data: Any = [_user_to_dict(user) for user in users]
        elif output_format == "text":
            if users:
                data = "\n".join(self._format_user_as_text(user) for user in users)
            else:
                data = "No users registered"
        else:
            return {
                "status": "error",
                "operation": "list",
                "message": f"Unsupported format: {output_format}",
            }

        return {
            "status": "success",
            "operation": "list",
            "count": len(users),
            "data": data,
        }

    def _error_result(
        self, operation: str, login: str, error: UserRegistrationError
    ) -> dict[str, Any]:
        result: dict[str, Any] = {
            "status": "error",
            "operation": operation,
            "login": login,
            "error_type": type(error).__name__,
            "message": str(error),
        }
        if isinstance(error, ConstraintViolationError):
            result["violations"] = [
                {"field": v.field, "message": v.message} for v in error.violations
            ]
        return result

    def _format_user_as_text(self, user: User) -> str:
        return f"{user.login}: {user.full_name}"


def _string_arg(args: dict[str, Any], name: str, default: str | None = None) -> str:
    value = args.get(name, default)
    if not isinstance(value, str):
        raise ValueError(f"Parameter {name} must be a string")
    return value


def run_command(
    handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Run a CLI command.

    Maps command names to handler methods.

    Args:
        handler: CLICommandHandler to execute the command with.
        command: Command name ('register', 'get', 'list').
        args: Dictionary of command arguments.

    Returns:
        Dictionary with command result.

    Raises:
        ValueError: If the command is unknown, or a required argument is
            missing or not a string.
    """
    if command == "register":
        missing = [k for k in ("full_name", "login", "password") if k not in args]
        if missing:
            raise ValueError(f"Missing required parameter: {', '.join(missing)}")
        return handler.register_user(
            full_name=_string_arg(args, "full_name"),
            login=_string_arg(args, "login"),
            password=_string_arg(args, "password"),
            verbose=bool(args.get("verbose", False)),
        )

    elif command == "get":
        if "login" not in args:
            raise ValueError("Missing required parameter: login")
        return handler.get_user(
            login=_string_arg(args, "login"),
            output_format=_string_arg(args, "format", "json"),
        )

    elif command == "list":
        return handler.list_users(output_format=_string_arg(args, "format", "json"))

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")
