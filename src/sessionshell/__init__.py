"""sessionshell: coordination core for a two-tab conference session browser."""

__version__ = "0.1.0"

from .core import PlaybackContextTracker, SelectionCoordinator
from .orchestration import MigrationOrchestrator, ShellOrchestrator

__all__ = [
    "MigrationOrchestrator",
    "PlaybackContextTracker",
    "SelectionCoordinator",
    "ShellOrchestrator",
]
