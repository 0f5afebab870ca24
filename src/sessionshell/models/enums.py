"""Enumerations for the session shell."""

from enum import Enum


class Tab(str, Enum):
    """The two parallel views over the same session records."""

    SCHEDULE = "schedule"
    VIDEOS = "videos"


class TransitionResult(str, Enum):
    """Result of a playback context operation."""

    ACCEPTED = "accepted"  # Operation applied
    BUSY = "busy"  # Refused: another context transition is in flight
    REJECTED = "rejected"  # Refused: not a valid transition from the current state


class MigrationChoice(str, Enum):
    """The three mutually exclusive answers to the migration prompt."""

    MIGRATE = "migrate"
    START_FRESH = "start_fresh"
    QUIT = "quit"


class MigrationPhase(str, Enum):
    """Phases of the one-shot migration workflow."""

    IDLE = "idle"
    CHECKING_LEGACY_STORE = "checking_legacy_store"
    PROMPTING_USER = "prompting_user"
    MIGRATING = "migrating"
    DONE = "done"
    TERMINATED = "terminated"


class MigrationOutcomeKind(str, Enum):
    """Terminal outcomes of a migration attempt."""

    SUCCESS = "success"  # Legacy data was migrated
    FAILURE = "failure"  # Migration ran and failed; user was notified
    SKIPPED = "skipped"  # User chose to start fresh
    DEFERRED = "deferred"  # Prompt was already shown for this store; not asked again
