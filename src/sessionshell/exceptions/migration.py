"""Legacy data migration exceptions."""

from pathlib import Path
from typing import Optional

from .base import SessionShellError


class MigrationFailedError(SessionShellError):
    """Migrating the legacy store failed.

    Recoverable: the user is told, and the shell carries on with whatever
    data the content store already holds.
    """

    def __init__(self, reason: str, legacy_store_location: Optional[Path] = None):
        technical = f"Legacy data migration failed: {reason}"
        if legacy_store_location is not None:
            technical = f"Legacy data migration from {legacy_store_location} failed: {reason}"

        super().__init__(
            user_message=f"Your previous data could not be migrated: {reason}",
            technical_message=technical,
            recoverable=True,
            recovery_hint="Your favorites and preferences from the old version were not imported.",
        )
        self.reason = reason
        self.legacy_store_location = legacy_store_location
