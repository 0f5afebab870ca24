"""Protocol definitions for observer patterns and collaborator interfaces.

- Events: selection, playback context and application events
- Observers: protocols for components that react to these events
- Collaborators: interfaces of the store, sync engine, migrator and prompt
"""

from .collaborators import (
    ActivityPublisher,
    ContentStore,
    ExecutionEnvironment,
    LegacyDataMigrator,
    LiveObserver,
    MigrationPrompt,
    MigratorFactory,
    StoreFactory,
    SyncEngine,
)
from .events import AppEvent, PlaybackContextEvent, SelectionEvent
from .observers import AppObserver, PlaybackObserver, SelectionObserver

__all__ = [
    # Collaborators
    "ActivityPublisher",
    # Events
    "AppEvent",
    # Observers
    "AppObserver",
    "ContentStore",
    "ExecutionEnvironment",
    "LegacyDataMigrator",
    "LiveObserver",
    "MigrationPrompt",
    "MigratorFactory",
    "PlaybackContextEvent",
    "PlaybackObserver",
    "SelectionEvent",
    "SelectionObserver",
    "StoreFactory",
    "SyncEngine",
]
