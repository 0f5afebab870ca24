"""Data models for the session shell."""

from .config import AppConfig
from .enums import MigrationChoice, MigrationOutcomeKind, MigrationPhase, Tab, TransitionResult
from .migration import MigrationOutcome, MigrationResult, MigrationState
from .playback import (
    IdleOwnership,
    OwnedPlayback,
    PlaybackContext,
    PlayerOwnership,
    RestoreDirective,
)
from .selection import SessionSelection

__all__ = [
    "AppConfig",
    "IdleOwnership",
    # Enums
    "MigrationChoice",
    # Models
    "MigrationOutcome",
    "MigrationOutcomeKind",
    "MigrationPhase",
    "MigrationResult",
    "MigrationState",
    "OwnedPlayback",
    "PlaybackContext",
    "PlayerOwnership",
    "RestoreDirective",
    "SessionSelection",
    "Tab",
    "TransitionResult",
]
