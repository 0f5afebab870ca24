"""Base exception class for sessionshell.

All custom exceptions inherit from SessionShellError to allow catching
all app-specific errors in one place. The base class provides:

- `user_message`: Human-friendly message for the prompt or terminal
- `technical_message`: Detailed message for the log file
- `recoverable`: Whether the shell keeps running after the error
- `recovery_hint`: Optional suggestion for how to fix the issue

A non-recoverable error (an unopenable content store) halts startup and is
logged at CRITICAL level. A recoverable one (a failed migration, a config
file the user can correct) is reported and logged at ERROR level.
"""

import logging
from typing import Optional


class SessionShellError(Exception):
    """
    Base exception for all sessionshell errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logging
        recoverable: Whether the shell can continue after the error
        recovery_hint: Optional hint for how to fix the issue
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recoverable: bool = False,
        recovery_hint: Optional[str] = None,
    ):
        super().__init__(user_message)
        self.user_message = user_message
        self.technical_message = technical_message or user_message
        self.recoverable = recoverable
        self.recovery_hint = recovery_hint

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    @property
    def is_fatal(self) -> bool:
        """True when the shell cannot start or continue after this error."""
        return not self.recoverable

    def log(self, target: logging.Logger) -> None:
        """Write the technical message to `target`, CRITICAL for fatal errors."""
        level = logging.CRITICAL if self.is_fatal else logging.ERROR
        target.log(level, f"{type(self).__name__}: {self.technical_message}")

    def get_full_message(self) -> str:
        """Get complete error message with recovery hint."""
        msg = self.user_message
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
