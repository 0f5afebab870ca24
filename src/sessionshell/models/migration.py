"""Migration workflow state models."""

from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

from .enums import MigrationOutcomeKind, MigrationPhase


class MigrationOutcome(BaseModel):
    """Terminal outcome of one migration attempt."""

    kind: MigrationOutcomeKind
    reason: Optional[str] = Field(default=None, description="Failure reason (FAILURE only)")

    @classmethod
    def success(cls) -> "MigrationOutcome":
        return cls(kind=MigrationOutcomeKind.SUCCESS)

    @classmethod
    def failure(cls, reason: str) -> "MigrationOutcome":
        return cls(kind=MigrationOutcomeKind.FAILURE, reason=reason)

    @classmethod
    def skipped(cls) -> "MigrationOutcome":
        return cls(kind=MigrationOutcomeKind.SKIPPED)

    @classmethod
    def deferred(cls) -> "MigrationOutcome":
        return cls(kind=MigrationOutcomeKind.DEFERRED)


class MigrationState(BaseModel):
    """
    Migration bookkeeping for one legacy store.

    Created lazily on the first check and retained for the rest of the
    process. `has_prompted_user` is a one-shot latch: once set, the prompt is
    never shown again for this store. `is_in_progress` is the re-entrancy
    latch, held from the start of an attempt until it reaches DONE.
    """

    legacy_store_location: Path
    needs_migration: bool = False
    has_prompted_user: bool = False
    is_in_progress: bool = False
    phase: MigrationPhase = MigrationPhase.IDLE
    outcome: Optional[MigrationOutcome] = None


class MigrationResult(BaseModel):
    """What a legacy data migrator reports when it finishes."""

    succeeded: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "MigrationResult":
        return cls(succeeded=True)

    @classmethod
    def failure(cls, reason: str) -> "MigrationResult":
        return cls(succeeded=False, error=reason)
