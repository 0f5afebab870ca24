"""
Centralized error handling utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI, migration notices)    │
│  - Formats error.user_message           │
│  - Shows error.recovery_hint            │
└─────────────────────────────────────────┘
                  ↑
                  │ SessionShellError
                  │
┌─────────────────────────────────────────┐
│  COORDINATION LAYER (orchestrators)     │
│  - Catches collaborator exceptions      │
│  - Converts to SessionShellError        │
└─────────────────────────────────────────┘
                  ↑
                  │ Exception, OSError, etc.
                  │
┌─────────────────────────────────────────┐
│  COLLABORATORS (store, sync, migrator)  │
└─────────────────────────────────────────┘
```

## Handling Patterns

| Pattern | Code |
|---------|------|
| Critical section with auto-logging | `with ErrorContext("open content store"): ...` |
| Config file failed validation | `raise wrap_pydantic_error(e, str(path)) from e` |
| Migration reported or raised a failure | `wrap_migration_error(reason, legacy_path)` |
| Show an error in the CLI | `message, hint = format_error_for_display(e)` |
"""

import logging
from pathlib import Path
from typing import Optional

from .base import SessionShellError
from .config import ConfigFileInvalidError, ConfigValidationError
from .migration import MigrationFailedError

logger = logging.getLogger(__name__)


class ErrorContext:
    """
    Context manager for error handling with automatic logging.

    Example:
        ```python
        with ErrorContext("open content store", logger_instance=logger):
            store = store_factory(path)
        ```
    """

    def __init__(
        self,
        operation: str,
        logger_instance: Optional[logging.Logger] = None,
        re_raise: bool = True
    ):
        """
        Initialize error context.

        Args:
            operation: Description of the operation
            logger_instance: Logger to use (defaults to module logger)
            re_raise: Whether to re-raise exceptions
        """
        self.operation = operation
        self.logger = logger_instance or logger
        self.re_raise = re_raise
        self.error: Optional[BaseException] = None

    def __enter__(self):
        self.logger.debug(f"Starting: {self.operation}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if exc_type is None:
            self.logger.debug(f"Completed: {self.operation}")
            return False

        self.error = exc_val

        if isinstance(exc_val, SessionShellError):
            self.logger.error(f"Failed to {self.operation}: {exc_val.technical_message}")
        else:
            self.logger.error(f"Failed to {self.operation}: {exc_val}", exc_info=True)

        # Return True to suppress exception, False to re-raise
        return not self.re_raise


def wrap_pydantic_error(error: Exception, file_path: str) -> SessionShellError:
    """
    Convert Pydantic validation errors to sessionshell exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the config file that failed validation

    Returns:
        A ConfigurationError with appropriate type and message
    """
    from pydantic import ValidationError

    error_msg = str(error)

    # Format: "Invalid JSON: <actual error> [type=json_invalid, ..."
    if "Invalid JSON" in error_msg or "json_invalid" in error_msg:
        if "Invalid JSON:" in error_msg:
            parse_error = error_msg.split("Invalid JSON:")[1].split("[type=")[0].strip()
        else:
            parse_error = error_msg
        return ConfigFileInvalidError(file_path, parse_error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if len(errors) == 1:
            first_error = errors[0]
            field = ".".join(str(loc) for loc in first_error.get("loc", ("unknown",)))
            return ConfigValidationError(
                field=field,
                value=first_error.get("input"),
                error_msg=first_error.get("msg", "validation failed"),
                file_path=file_path,
            )
        if errors:
            error_lines = []
            for err in errors:
                field = ".".join(str(loc) for loc in err.get("loc", ("unknown",)))
                error_lines.append(f"  - {field}: {err.get('msg', 'validation failed')}")
            return ConfigValidationError(
                field="multiple fields",
                value=None,
                error_msg=f"{len(errors)} validation errors:\n" + "\n".join(error_lines),
                file_path=file_path,
            )

    return ConfigValidationError(
        field="unknown",
        value=None,
        error_msg=error_msg,
        file_path=file_path,
    )


def wrap_migration_error(
    error: Exception | str | None,
    legacy_store_location: Optional[Path] = None
) -> MigrationFailedError:
    """
    Convert a migrator failure (raised or reported) into a MigrationFailedError.

    Args:
        error: The exception raised by the migrator, or the reason it reported
        legacy_store_location: Legacy store the migration read from

    Returns:
        MigrationFailedError ready to be shown as a notice
    """
    if isinstance(error, MigrationFailedError):
        return error
    if isinstance(error, SessionShellError):
        reason = error.user_message
    elif isinstance(error, Exception):
        reason = str(error) or type(error).__name__
    else:
        reason = error or "unknown error"
    return MigrationFailedError(reason, legacy_store_location=legacy_store_location)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Args:
        error: The exception to format

    Returns:
        Tuple of (user_message, recovery_hint or None)
    """
    if isinstance(error, SessionShellError):
        return error.user_message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
