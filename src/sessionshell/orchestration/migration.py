"""
One-shot, user-gated migration of a previous version's data.

Workflow:

    IDLE ─▶ CHECKING_LEGACY_STORE ─┬─ nothing to do / already prompted ─▶ DONE
                                   └─▶ PROMPTING_USER ─┬─ migrate ─▶ MIGRATING ─▶ DONE
                                                       ├─ start fresh ─▶ DONE
                                                       └─ quit ─▶ TERMINATED

`completion` runs exactly once for every attempt that reaches DONE. It never
runs for an attempt that terminates the process, that is interrupted by an
exception, or that is dropped because another attempt is already in flight.
Callers load lists from the content store inside `completion` only.
"""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Optional

from sessionshell.exceptions import wrap_migration_error
from sessionshell.models import (
    MigrationChoice,
    MigrationOutcome,
    MigrationPhase,
    MigrationResult,
    MigrationState,
)
from sessionshell.protocols import (
    ContentStore,
    ExecutionEnvironment,
    LegacyDataMigrator,
    MigrationPrompt,
    MigratorFactory,
)

logger = logging.getLogger(__name__)

Completion = Callable[[], None]


class MigrationOrchestrator:
    """
    Offers the legacy data migration to the user at most once per legacy store.

    Both latches live on the MigrationState, which is created on the first
    check and kept for the lifetime of the orchestrator:

    - `is_in_progress` drops re-entrant `run_if_needed` calls while an
      attempt is prompting or migrating
    - `has_prompted_user` is set as soon as the prompt is shown, before the
      answer is known, so an abandoned prompt or a failed migration is never
      offered again
    """

    def __init__(
        self,
        legacy_store_location: Path,
        destination: ContentStore,
        migrator_factory: MigratorFactory,
        prompt: MigrationPrompt,
        environment: ExecutionEnvironment,
        terminate: Callable[[], None],
    ):
        """
        Args:
            legacy_store_location: Where the previous version kept its store
            destination: Content store the migration writes into
            migrator_factory: Builds a migrator for (legacy location, destination)
            prompt: Presents the three-way choice and error notices
            environment: Source of the skip-migration directive
            terminate: Requests process termination (quit choice)
        """
        self._legacy_store_location = legacy_store_location
        self._destination = destination
        self._migrator_factory = migrator_factory
        self._prompt = prompt
        self._environment = environment
        self._terminate = terminate
        self._state: Optional[MigrationState] = None

    @property
    def state(self) -> Optional[MigrationState]:
        """Migration bookkeeping, or None before the first check."""
        return self._state

    @property
    def phase(self) -> MigrationPhase:
        return self._state.phase if self._state else MigrationPhase.IDLE

    def run_if_needed(self, completion: Completion) -> None:
        """
        Run the migration workflow, then call `completion`.

        Args:
            completion: Called once the workflow reached a terminal outcome
                        (or found nothing to do). Not called when the user
                        quits, when another attempt is already running, or
                        when the check or prompt raises (the exception
                        propagates and the attempt is abandoned).
        """
        if self._environment.skip_migration:
            logger.info("Skipping legacy data migration (skip directive set)")
            completion()
            return

        state = self._ensure_state()
        if state.is_in_progress:
            logger.debug(f"Migration attempt already in flight ({state.phase.value}), ignoring")
            return

        state.is_in_progress = True
        state.outcome = None

        # The latch must not outlive an attempt that never reached DONE
        try:
            self._set_phase(MigrationPhase.CHECKING_LEGACY_STORE)
            migrator = self._migrator_factory(state.legacy_store_location, self._destination)
            state.needs_migration = migrator.needs_migration

            if state.needs_migration and not state.has_prompted_user:
                self._set_phase(MigrationPhase.PROMPTING_USER)
                state.has_prompted_user = True
                choice = MigrationChoice(self._prompt.ask_migration_choice())
        except BaseException:
            self._abandon()
            raise

        if not state.needs_migration:
            logger.info(f"No legacy data to migrate at {state.legacy_store_location}")
            self._finish(None, completion)
            return

        if state.phase is not MigrationPhase.PROMPTING_USER:
            logger.info("Migration prompt was already shown for this store, not asking again")
            self._finish(MigrationOutcome.deferred(), completion)
            return

        logger.info(f"User chose to {choice.value.replace('_', ' ')}")

        if choice is MigrationChoice.MIGRATE:
            self._migrate(migrator, completion)
        elif choice is MigrationChoice.START_FRESH:
            self._finish(MigrationOutcome.skipped(), completion)
        else:
            self._set_phase(MigrationPhase.TERMINATED)
            logger.info("Terminating at the user's request")
            self._terminate()

    # =================================================================
    # Internals
    # =================================================================

    def _ensure_state(self) -> MigrationState:
        if self._state is None:
            self._state = MigrationState(legacy_store_location=self._legacy_store_location)
        return self._state

    def _set_phase(self, phase: MigrationPhase) -> None:
        state = self._ensure_state()
        logger.debug(f"Migration phase: {state.phase.value} -> {phase.value}")
        state.phase = phase

    def _migrate(self, migrator: LegacyDataMigrator, completion: Completion) -> None:
        self._set_phase(MigrationPhase.MIGRATING)
        delivered = False

        def on_finished(result: MigrationResult) -> None:
            nonlocal delivered
            if delivered:
                logger.warning(f"Ignoring duplicate migration result: {result}")
                return
            delivered = True
            self._migration_finished(result, completion)

        try:
            migrator.perform_migration(on_finished)
        except Exception as e:
            if delivered:
                # Raised after the result was handled: completion or the notice
                raise
            logger.error(f"Migrator raised before reporting a result: {e}", exc_info=True)
            on_finished(MigrationResult.failure(str(e) or type(e).__name__))

    def _migration_finished(self, result: MigrationResult, completion: Completion) -> None:
        if result.succeeded:
            logger.info("Legacy data migrated")
            self._finish(MigrationOutcome.success(), completion)
            return

        error = wrap_migration_error(result.error, self._legacy_store_location)
        error.log(logger)
        try:
            self._prompt.show_error(error.get_full_message())
        except BaseException:
            self._abandon()
            raise
        self._finish(MigrationOutcome.failure(error.reason), completion)

    def _abandon(self) -> None:
        """Release the re-entrancy latch after an attempt was interrupted."""
        state = self._ensure_state()
        logger.warning(f"Migration attempt interrupted during {state.phase.value}")
        state.is_in_progress = False
        self._set_phase(MigrationPhase.IDLE)

    def _finish(self, outcome: Optional[MigrationOutcome], completion: Completion) -> None:
        state = self._ensure_state()
        state.outcome = outcome
        self._set_phase(MigrationPhase.DONE)
        state.is_in_progress = False
        completion()
