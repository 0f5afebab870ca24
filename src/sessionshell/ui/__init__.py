"""Terminal user-interaction surfaces."""

from .console_prompt import ConsoleMigrationPrompt

__all__ = ["ConsoleMigrationPrompt"]
