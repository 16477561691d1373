"""Composition root for the signup registration service.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive CLI loop
"""

import json
import logging
import sys

from signup.adapters.cli.commands import CLICommandHandler, run_command
from signup.adapters.store.memory import InMemoryUserRepository
from signup.config import Settings, load_settings
from signup.core.user_service import UserService
from signup.core.validator import UserValidator

HELP_TEXT = """
Available Commands (JSON format):

  register
    Register a new user.
    Required: full_name, login, password

    Example: register {"full_name": "Anton Kononko", "login": "anton888", "password": "abcde1"}

  get
    Look up a user by login.
    Required: login
    Optional: format ("json" or "text")

    Example: get {"login": "anton888"}

  list
    List all registered users.
    Optional: format ("json" or "text")

    Example: list {"format": "text"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
"""


def run_cli(cli_handler: CLICommandHandler, prompt: str = "signup> ") -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for registration commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
        prompt: Prompt shown before each command.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input(prompt).strip()
        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue

        if not command_line:
            continue

        if command_line.lower() == "exit":
            logger.info("Exiting CLI")
            break

        if command_line.lower() == "help":
            print(HELP_TEXT)
            continue

        parts = command_line.split(maxsplit=1)
        command = parts[0].lower()
        args_str = parts[1] if len(parts) > 1 else ""

        try:
            args = json.loads(args_str) if args_str else {}
        except json.JSONDecodeError:
            logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
            continue

        if not isinstance(args, dict):
            logger.error("Command arguments must be a JSON object.")
            continue

        try:
            result = run_command(cli_handler, command, args)
        except ValueError as e:
            result = {"status": "error", "message": str(e)}
        except Exception as e:
            logger.error(f"Command execution error: {e}", exc_info=True)
            result = {"status": "error", "message": str(e)}

        print(json.dumps(result, indent=2, ensure_ascii=False))


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_service(settings: Settings) -> UserService:
    """Wire the repository, validator and service from settings."""
    repository = InMemoryUserRepository()
    validator = UserValidator(
        repository=repository,
        min_password_length=settings.password_min_length,
        max_password_length=settings.password_max_length,
        password_pattern=settings.password_pattern,
    )
    return UserService(repository=repository, validator=validator)


def bootstrap() -> None:
    """Load configuration, wire adapters, and start the CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Build the user service and its adapters
    4. Run the interactive CLI
    """
    settings = load_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading signup registration service...")

    service = build_service(settings)
    logger.info(
        f"Password policy: length {settings.password_min_length}-"
        f"{settings.password_max_length}, pattern {settings.password_pattern}"
    )

    run_cli(CLICommandHandler(service))


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
