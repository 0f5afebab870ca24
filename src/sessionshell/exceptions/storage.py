"""Content store exceptions.

Failing to open the primary content store is the only fatal condition of
the shell: startup halts before any UI is shown.
"""

from pathlib import Path

from .base import SessionShellError


class StorageInitializationError(SessionShellError):
    """The primary content store could not be opened."""

    def __init__(self, store_path: Path, original_error: str):
        """
        Initialize storage initialization error.

        Args:
            store_path: Location the store was opened from
            original_error: Message of the underlying failure
        """
        super().__init__(
            user_message="The session database could not be opened",
            technical_message=f"Content store initialization failed for {store_path}: {original_error}",
            recoverable=False,
            recovery_hint=(
                f"Check that {store_path.parent} is writable.\n"
                f"If the file is corrupted, move {store_path.name} aside and restart "
                "to download the schedule again."
            ),
        )
        self.store_path = store_path
        self.original_error = original_error
