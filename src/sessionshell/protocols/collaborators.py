"""Interfaces of the shell's external collaborators.

The content store, sync engine, legacy migrator, user prompt and activity
publisher are implemented outside the coordination core; only the calls
the core makes on them are described here.
"""

from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING, Any, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sessionshell.models import MigrationChoice, MigrationResult, SessionSelection


@runtime_checkable
class ContentStore(Protocol):
    """Primary persistent store of sessions, tracks and schedule."""

    @property
    def location(self) -> Path:
        """File-system location the store was opened from."""
        ...

    def tracks(self) -> Sequence[Any]:
        """Current video tracks."""
        ...

    def schedule_sections(self) -> Sequence[Any]:
        """Current schedule sections."""
        ...


@runtime_checkable
class SyncEngine(Protocol):
    """Remote sync engine."""

    def sync_sessions_and_schedule(self) -> None:
        ...

    def sync_live_videos(self) -> None:
        ...

    def add_sessions_and_schedule_listener(self, callback: Callable[[], None]) -> None:
        """Call `callback` every time a sessions-and-schedule sync completes."""
        ...

    def remove_sessions_and_schedule_listener(self, callback: Callable[[], None]) -> None:
        ...


@runtime_checkable
class LegacyDataMigrator(Protocol):
    """Reader of a previous version's store, bound to a source and a destination."""

    @property
    def needs_migration(self) -> bool:
        ...

    def perform_migration(self, on_finished: Callable[["MigrationResult"], None]) -> None:
        """
        Copy legacy user data into the destination store.

        `on_finished` is called once with the terminal result, either before
        this method returns or later.
        """
        ...


MigratorFactory = Callable[[Path, ContentStore], LegacyDataMigrator]
"""Builds a migrator for (legacy store location, destination store)."""

StoreFactory = Callable[[Path], ContentStore]
"""Opens the primary content store at a path. Raises if it cannot."""


@runtime_checkable
class MigrationPrompt(Protocol):
    """User-interaction surface for the migration workflow."""

    def ask_migration_choice(self) -> "MigrationChoice":
        """Present migrate / start fresh / quit and block until the user picks one."""
        ...

    def show_error(self, message: str) -> None:
        """Show a non-fatal error notice."""
        ...


@runtime_checkable
class ExecutionEnvironment(Protocol):
    """Process-level directives."""

    @property
    def skip_migration(self) -> bool:
        ...


@runtime_checkable
class ActivityPublisher(Protocol):
    """Publishes the current activity (hand-off) for the effective selection."""

    def update_current_activity(self, selection: Optional["SessionSelection"]) -> None:
        ...


@runtime_checkable
class LiveObserver(Protocol):
    """Watches the store for live sessions once lists are loaded."""

    def start(self) -> None:
        ...
