"""
Custom exception hierarchy for sessionshell.

## Exception Hierarchy

```
SessionShellError (base)
├── StorageInitializationError   (fatal, halts startup)
├── MigrationFailedError         (recoverable, shown as a notice)
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

Guard refusals (a duplicate migration run, a playback transition while
another is in flight) are deliberately NOT exceptions: they are reported as
return values and logged at DEBUG.

See `sessionshell.exceptions.handlers` for utilities to handle these
exceptions systematically.
"""

from .base import SessionShellError
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorContext,
    format_error_for_display,
    wrap_migration_error,
    wrap_pydantic_error,
)
from .migration import MigrationFailedError
from .storage import StorageInitializationError

__all__ = [
    # Config
    "ConfigFileInvalidError",
    "ConfigValidationError",
    "ConfigurationError",
    # Handlers
    "ErrorContext",
    # Migration
    "MigrationFailedError",
    # Base
    "SessionShellError",
    # Storage
    "StorageInitializationError",
    "format_error_for_display",
    "wrap_migration_error",
    "wrap_pydantic_error",
]
